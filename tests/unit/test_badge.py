"""Tests for the permission badge presenter."""

import pytest

from rdftypes.core.config import RdfTypesSettings
from rdftypes.core.exceptions import ConfigurationError
from rdftypes.presenters.badge import Badge, PermissionBadge


class TestPermissionBadge:
    """Tests for label and class selection."""

    def test_open(self):
        assert PermissionBadge("open").render() == Badge(text="Public", css_class="label label-success")

    def test_restricted(self):
        badge = PermissionBadge("restricted")

        assert badge.text == "Private"
        assert badge.dom_class == "label label-danger"

    def test_authenticated_shows_institution(self):
        badge = PermissionBadge("authenticated", institution_name="Example University")

        assert badge.registered
        assert badge.text == "Example University"
        assert badge.dom_class == "label label-info"

    def test_institution_from_settings(self):
        settings = RdfTypesSettings(institution_name="Settings University")

        assert PermissionBadge("authenticated", settings=settings).text == "Settings University"

    def test_custom_lookup(self):
        labels = {
            "visibility.open.text": "Öffentlich",
            "visibility.open.class": "badge-open",
        }

        badge = PermissionBadge("open", lookup=labels.__getitem__)

        assert badge.render() == Badge(text="Öffentlich", css_class="label badge-open")

    def test_unknown_visibility(self):
        with pytest.raises(ConfigurationError):
            PermissionBadge("secret").render()
