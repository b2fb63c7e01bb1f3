"""
Tests for adminbro.options module.

Tests option records, defaults and the non-mutating merge.
"""

import pytest

from adminbro.dashboard import DefaultDashboard, PageBuilder
from adminbro.exceptions import ConfigurationError
from adminbro.options import (
    DEFAULT_LOGO,
    DEFAULT_OPTIONS,
    ActionOptions,
    AdminOptions,
    ResourceEntry,
    ResourceOptions,
    deep_merge,
    merge_options,
)


class TestDefaults:
    def test_default_paths(self):
        assert DEFAULT_OPTIONS.root_path == "/admin"
        assert DEFAULT_OPTIONS.logout_path == "/admin/logout"
        assert DEFAULT_OPTIONS.login_path == "/admin/login"

    def test_default_branding(self):
        assert DEFAULT_OPTIONS.branding.logo == DEFAULT_LOGO
        assert DEFAULT_OPTIONS.branding.company_name == "Company Name"
        assert DEFAULT_OPTIONS.branding.show_vendor_badge is True

    def test_default_assets_and_dashboard(self):
        assert DEFAULT_OPTIONS.assets.styles == ("/style.css",)
        assert DEFAULT_OPTIONS.assets.scripts == ("/scripts.js",)
        assert DEFAULT_OPTIONS.dashboard is DefaultDashboard
        assert DEFAULT_OPTIONS.databases == ()
        assert DEFAULT_OPTIONS.resources == ()

    def test_defaults_are_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_OPTIONS.root_path = "/other"  # type: ignore[misc]

    def test_default_sequences_cannot_be_mutated(self):
        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.assets.styles.append("/leak.css")  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.databases.append(object())  # type: ignore[attr-defined]

        assert DEFAULT_OPTIONS.assets.styles == ("/style.css",)
        assert DEFAULT_OPTIONS.databases == ()


class TestDeepMerge:
    def test_nested_mappings_merge(self):
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        merged = deep_merge(base, {"a": {"y": 3}})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1}

    def test_lists_are_replaced(self):
        merged = deep_merge({"styles": ["/a.css", "/b.css"]}, {"styles": ["/c.css"]})
        assert merged == {"styles": ["/c.css"]}

    def test_inputs_are_not_mutated(self):
        base = {"a": {"x": 1}, "items": [1]}
        override = {"a": {"x": 2}, "items": [2]}
        merged = deep_merge(base, override)

        merged["a"]["x"] = 99
        merged["items"].append(3)

        assert base == {"a": {"x": 1}, "items": [1]}
        assert override == {"a": {"x": 2}, "items": [2]}

    def test_result_shares_no_containers_with_base(self):
        base = {"a": {"x": [1]}}
        merged = deep_merge(base, {})
        assert merged["a"] is not base["a"]
        assert merged["a"]["x"] is not base["a"]["x"]


class TestMergeOptions:
    def test_none_returns_defaults(self):
        options = merge_options(DEFAULT_OPTIONS, None)
        assert options == DEFAULT_OPTIONS
        assert options is not DEFAULT_OPTIONS

    def test_branding_partial_override(self):
        options = merge_options(DEFAULT_OPTIONS, {"branding": {"companyName": "Acme"}})

        assert options.branding.company_name == "Acme"
        assert options.branding.logo == DEFAULT_OPTIONS.branding.logo
        assert options.branding.show_vendor_badge is True

    def test_snake_case_keys(self):
        options = merge_options(DEFAULT_OPTIONS, {"root_path": "/xyz-admin"})
        assert options.root_path == "/xyz-admin"

    def test_camel_case_keys(self):
        options = merge_options(
            DEFAULT_OPTIONS,
            {"rootPath": "/xyz-admin", "logoutPath": "/xyz-admin/exit", "loginPath": "/xyz-admin/sign-in"},
        )
        assert options.root_path == "/xyz-admin"
        assert options.logout_path == "/xyz-admin/exit"
        assert options.login_path == "/xyz-admin/sign-in"

    def test_assets_arrays_replaced_not_concatenated(self):
        options = merge_options(DEFAULT_OPTIONS, {"assets": {"styles": ["/custom.css"]}})

        assert options.assets.styles == ("/custom.css",)
        assert options.assets.scripts == ("/scripts.js",)

    def test_record_user_options_only_apply_set_fields(self):
        user = AdminOptions(login_path="/sign-in")
        defaults = merge_options(DEFAULT_OPTIONS, {"root_path": "/backoffice"})

        options = merge_options(defaults, user)

        assert options.login_path == "/sign-in"
        assert options.root_path == "/backoffice"

    def test_custom_dashboard(self):
        class Custom(PageBuilder):
            pass

        options = merge_options(DEFAULT_OPTIONS, {"dashboard": Custom})
        assert options.dashboard is Custom

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid admin options"):
            merge_options(DEFAULT_OPTIONS, {"rootPth": "/typo"})

    def test_invalid_path_raises(self):
        with pytest.raises(ConfigurationError):
            merge_options(DEFAULT_OPTIONS, {"root_path": "admin"})

    def test_trailing_slash_is_stripped(self):
        options = merge_options(DEFAULT_OPTIONS, {"root_path": "/admin/"})
        assert options.root_path == "/admin"

    def test_defaults_never_leak_between_merges(self):
        first = merge_options(DEFAULT_OPTIONS, {"branding": {"company_name": "First"}})
        second = merge_options(DEFAULT_OPTIONS, {"assets": {"scripts": ["/second.js"]}})

        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.assets.styles.append("/leak.css")  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            first.assets.styles.append("/leak.css")  # type: ignore[attr-defined]

        third = merge_options(DEFAULT_OPTIONS)

        assert first.branding.company_name == "First"
        assert second.branding.company_name == "Company Name"
        assert second.assets.styles == ("/style.css",)
        assert second.assets.scripts == ("/second.js",)
        assert third.assets.styles == ("/style.css",)
        assert third.assets.scripts == ("/scripts.js",)
        assert DEFAULT_OPTIONS.branding.company_name == "Company Name"

    def test_databases_keep_handle_identity(self):
        handle = object()
        options = merge_options(DEFAULT_OPTIONS, {"databases": [handle]})
        assert options.databases[0] is handle


class TestResourceEntries:
    def test_mapping_entries_become_resource_entries(self):
        handle = object()
        options = merge_options(
            DEFAULT_OPTIONS,
            {
                "resources": [
                    {
                        "resource": handle,
                        "options": {
                            "name": "Artykul",
                            "listProperties": ["title", "content"],
                            "parent": {"name": "Knowledge", "icon": "icon-bomb"},
                            "actions": {"edit": {"enable": False}},
                        },
                    }
                ]
            },
        )

        entry = options.resources[0]
        assert isinstance(entry, ResourceEntry)
        assert entry.resource is handle
        assert entry.options.name == "Artykul"
        assert entry.options.list_properties == ["title", "content"]
        assert entry.options.parent.icon == "icon-bomb"
        assert entry.options.actions["edit"].enable is False

    def test_bare_handles_are_kept(self):
        handle = object()
        options = merge_options(DEFAULT_OPTIONS, {"resources": [handle]})
        assert options.resources == (handle,)

    def test_resource_entry_default_options(self):
        entry = ResourceEntry(resource="raw")
        assert entry.options == ResourceOptions()
        assert entry.options.actions == {}

    def test_action_enable_views_validated(self):
        with pytest.raises(Exception):
            ActionOptions(enable=["list", "archive"])

    def test_action_handler_callable(self):
        def publish(request):
            return "PUBLISH ACTION WORKS"

        action = ActionOptions(id="publish", icon="fas fa-share", label="Publish", enable=["list", "show"], handler=publish)
        assert action.handler is publish
