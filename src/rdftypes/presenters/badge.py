"""Visibility badge presenter.

Maps a visibility code to the label text and CSS class of a badge.
Label lookup is pluggable; markup is left to the caller.
"""

from dataclasses import dataclass
from typing import Callable

from rdftypes.core.config import RdfTypesSettings, get_settings
from rdftypes.core.exceptions import ConfigurationError

VISIBILITY_OPEN = "open"
VISIBILITY_AUTHENTICATED = "authenticated"
VISIBILITY_RESTRICTED = "restricted"

DEFAULT_LABELS: dict[str, str] = {
    "visibility.open.text": "Public",
    "visibility.open.class": "label-success",
    "visibility.authenticated.text": "Institution",
    "visibility.authenticated.class": "label-info",
    "visibility.restricted.text": "Private",
    "visibility.restricted.class": "label-danger",
    "visibility.embargo.text": "Embargo",
    "visibility.embargo.class": "label-warning",
    "visibility.lease.text": "Lease",
    "visibility.lease.class": "label-warning",
}


@dataclass(frozen=True)
class Badge:
    """Rendered badge.

    Attributes:
        text: Label shown to the user
        css_class: Space-separated CSS classes
    """
    text: str
    css_class: str


def default_lookup(key: str) -> str:
    """Resolve a label key from the built-in English table."""
    try:
        return DEFAULT_LABELS[key]
    except KeyError:
        raise ConfigurationError(f"No label defined for '{key}'", setting_name=key) from None


class PermissionBadge:
    """Badge for an item's visibility.

    Institution-registered items show the institution's name instead
    of the generic label.

    Example:
        >>> PermissionBadge("open").render()
        Badge(text='Public', css_class='label label-success')
    """

    def __init__(
        self,
        visibility: str,
        lookup: Callable[[str], str] | None = None,
        institution_name: str | None = None,
        settings: RdfTypesSettings | None = None,
    ) -> None:
        self.visibility = visibility
        self.lookup = lookup or default_lookup
        self._institution_name = institution_name
        self._settings = settings

    @property
    def registered(self) -> bool:
        return self.visibility == VISIBILITY_AUTHENTICATED

    @property
    def institution_name(self) -> str:
        if self._institution_name is not None:
            return self._institution_name
        return (self._settings or get_settings()).institution_name

    @property
    def text(self) -> str:
        if self.registered:
            return self.institution_name
        return self.lookup(f"visibility.{self.visibility}.text")

    @property
    def dom_class(self) -> str:
        return f"label {self.lookup(f'visibility.{self.visibility}.class')}"

    def render(self) -> Badge:
        return Badge(text=self.text, css_class=self.dom_class)
