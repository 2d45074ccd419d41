"""
Manifest field errors — one value per violation, joined into one report.

Validation never stops at the first problem. Each check produces a
``FieldError`` naming the offending document path(s); the validator
collects them and ``join_errors`` folds the lot into a single
``ManifestValidationError`` for the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldError:
    """A single violation at one or more manifest paths."""

    message: str
    details: str = ""
    paths: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        text = self.message
        if self.paths:
            text = f"{text}: {', '.join(self.paths)}"
        if self.details:
            text = f"{text}\n{self.details}"
        return text

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "details": self.details,
            "paths": list(self.paths),
        }


class ManifestValidationError(Exception):
    """Every violation found in a manifest, reported together."""

    def __init__(self, errors: Sequence[FieldError | Exception]):
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.errors)

    def to_list(self) -> list[dict]:
        issues = []
        for err in self.errors:
            if isinstance(err, FieldError):
                issues.append(err.to_dict())
            else:
                issues.append({"message": str(err), "details": "", "paths": []})
        return issues


def join_errors(
    errors: Iterable[FieldError | Exception | None],
) -> ManifestValidationError | None:
    """Combine errors into one, or None when there is nothing to report."""
    collected = [e for e in errors if e is not None]
    if not collected:
        return None
    return ManifestValidationError(collected)


def _quoted(items: Iterable[str]) -> str:
    return ",".join(f'"{item}"' for item in items)


def invalid_name_error(name: str, details: str, paths: Sequence[str]) -> FieldError:
    return FieldError(f'invalid name "{name}"', details, tuple(paths))


def missing_fields_error(fields: Sequence[str], paths: Sequence[str]) -> FieldError:
    return FieldError(f"missing field(s) {_quoted(fields)}", paths=tuple(paths))


def duplicate_fields_error(fields: Sequence[str], paths: Sequence[str]) -> FieldError:
    return FieldError(f"duplicate field(s) {_quoted(fields)}", paths=tuple(paths))


def missing_service_ref_error(svc: str, app: str, paths: Sequence[str]) -> FieldError:
    return FieldError(f'missing service "{svc}" in app "{app}"', paths=tuple(paths))


def duplicate_source_error(url: str, paths: Sequence[str]) -> FieldError:
    return FieldError(f"duplicate source {url}", paths=tuple(paths))


def multiple_one_of_error(*paths: str) -> FieldError:
    """Two mutually exclusive fields were both set."""
    return FieldError("expected exactly one, got both", paths=paths)


def config_name_conflict_error(env: str, path: str) -> FieldError:
    return FieldError(
        f'environment "{env}" cannot have the same name as a config name',
        paths=(path,),
    )
