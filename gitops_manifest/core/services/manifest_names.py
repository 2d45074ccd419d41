"""
Name rules — DNS-1035 labels, as Kubernetes uses for namespaces and services.

Environment, application, service, secret and binding names all end up
as Kubernetes object names, so they must be valid labels.
"""

from __future__ import annotations

import re

from gitops_manifest.core.services.manifest_errors import FieldError, invalid_name_error

DNS1035_LABEL_MAX_LENGTH = 63

_DNS1035_LABEL_FMT = "[a-z]([-a-z0-9]*[a-z0-9])?"
_DNS1035_LABEL_RE = re.compile(_DNS1035_LABEL_FMT)

_DNS1035_LABEL_ERR = (
    "a DNS-1035 label must consist of lower case alphanumeric characters or '-', "
    "start with an alphabetic character, and end with an alphanumeric character "
    f"(e.g. 'my-name', or 'abc-123', regex used for validation is '{_DNS1035_LABEL_FMT}')"
)


def dns1035_label_errors(value: str) -> list[str]:
    """Return the reasons ``value`` is not a DNS-1035 label (empty if valid)."""
    errors = []
    if len(value) > DNS1035_LABEL_MAX_LENGTH:
        errors.append(f"must be no more than {DNS1035_LABEL_MAX_LENGTH} characters")
    if not _DNS1035_LABEL_RE.fullmatch(value):
        errors.append(_DNS1035_LABEL_ERR)
    return errors


def is_valid_name(value: str) -> bool:
    return not dns1035_label_errors(value)


def validate_name(name: str, path: str) -> FieldError | None:
    """Check a name, reporting the first rule it breaks at ``path``."""
    errors = dns1035_label_errors(name)
    if errors:
        return invalid_name_error(name, errors[0], [path])
    return None
