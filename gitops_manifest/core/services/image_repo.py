"""
Image repository check — where a service's built images are pushed.

Accepted forms:
    <registry>/<username>/<repository>    external registry
    <project>/<app>                       internal cluster registry

For the short form the internal registry host is prepended.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_INTERNAL_REGISTRY = "image-registry.openshift-image-registry.svc:5000"

# Public registries that need an explicit username component
_PUBLIC_REGISTRIES = ("docker.io", "quay.io")


class ImageRepoError(ValueError):
    """Raised when an image repository string cannot be parsed."""

    def __init__(self, image_repo: str):
        self.image_repo = image_repo
        super().__init__(
            f"failed to parse image repo: {image_repo}, expected image repository "
            "in the form <registry>/<username>/<repository> or <project>/<app> "
            "for internal registry"
        )


def _is_blank(component: str) -> bool:
    return component.strip() == "" or len(component) > len(component.strip())


def validate_image_repo(
    image_repo: str,
    registry_url: str = DEFAULT_INTERNAL_REGISTRY,
) -> tuple[bool, str]:
    """Validate an image repository and resolve it to a full reference.

    Args:
        image_repo: Repository as given by the user.
        registry_url: Host of the internal cluster registry.

    Returns:
        (is_internal, image_repo). ``is_internal`` is True when the
        images go to the internal registry.

    Raises:
        ImageRepoError: If the repository is not in a recognised form.
    """
    components = image_repo.split("/")

    if len(components) < 2 or len(components) > 3:
        raise ImageRepoError(image_repo)
    if any(_is_blank(c) for c in components):
        raise ImageRepoError(image_repo)

    if len(components) == 2:
        if components[0] in _PUBLIC_REGISTRIES:
            raise ImageRepoError(image_repo)
        resolved = f"{registry_url}/{image_repo}"
        logger.debug("Using internal registry for %s -> %s", image_repo, resolved)
        return True, resolved

    return components[0] == registry_url, image_repo
