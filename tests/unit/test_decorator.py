"""
Unit tests for BaseDecorator.
"""

import pytest

from adminbro.adapters.memory import MemoryResource
from adminbro.admin import AdminBro
from adminbro.decorator import DEFAULT_MAX_LIST_PROPERTIES, BaseDecorator, default_actions
from adminbro.exceptions import ConfigurationError
from adminbro.options import ActionOptions, ParentOptions, ResourceOptions


@pytest.fixture
def articles(blog_store) -> MemoryResource:
    return MemoryResource(blog_store.collections["articles"])


@pytest.fixture
def admin(registry) -> AdminBro:
    return AdminBro(registry=registry)


class TestNames:
    def test_default_name_is_resource_name(self, articles, admin):
        decorator = BaseDecorator(articles, admin)
        assert decorator.get_resource_name() == "articles"

    def test_option_name(self, articles, admin):
        decorator = BaseDecorator(articles, admin, ResourceOptions(name="Artykul"))
        assert decorator.get_resource_name() == "Artykul"

    def test_default_parent_is_database(self, articles, admin):
        decorator = BaseDecorator(articles, admin)
        assert decorator.get_parent() == {"name": "blog", "icon": "icon-memory"}

    def test_option_parent(self, articles, admin):
        options = ResourceOptions(parent=ParentOptions(name="Knowledge", icon="icon-bomb"))
        decorator = BaseDecorator(articles, admin, options)
        assert decorator.get_parent() == {"name": "Knowledge", "icon": "icon-bomb"}


class TestProperties:
    def test_default_list_properties_are_capped(self, articles, admin):
        props = BaseDecorator(articles, admin).get_list_properties()
        assert len(props) <= DEFAULT_MAX_LIST_PROPERTIES
        assert props[0].path() == "id"

    def test_default_edit_properties_skip_id(self, articles, admin):
        paths = [p.path() for p in BaseDecorator(articles, admin).get_edit_properties()]
        assert paths == ["title", "content", "views", "published"]

    def test_default_show_properties_are_all(self, articles, admin):
        paths = [p.path() for p in BaseDecorator(articles, admin).get_show_properties()]
        assert paths == ["id", "title", "content", "views", "published"]

    def test_configured_properties_keep_order(self, articles, admin):
        options = ResourceOptions(
            list_properties=["title", "content"],
            show_properties=["title"],
            edit_properties=["content", "title"],
        )
        decorator = BaseDecorator(articles, admin, options)

        assert [p.path() for p in decorator.get_list_properties()] == ["title", "content"]
        assert [p.path() for p in decorator.get_show_properties()] == ["title"]
        assert [p.path() for p in decorator.get_edit_properties()] == ["content", "title"]

    def test_unknown_property_raises(self, articles, admin):
        decorator = BaseDecorator(articles, admin, ResourceOptions(list_properties=["missing"]))
        with pytest.raises(ConfigurationError, match="no property 'missing'"):
            decorator.get_list_properties()


class TestActions:
    def test_default_actions(self, articles, admin):
        actions = BaseDecorator(articles, admin).get_actions()
        assert set(actions) == set(default_actions())

    def test_disable_default_action(self, articles, admin):
        options = ResourceOptions(actions={"edit": ActionOptions(enable=False)})
        actions = BaseDecorator(articles, admin, options).get_actions()
        assert "edit" not in actions

    def test_override_keeps_unset_default_fields(self, articles, admin):
        options = ResourceOptions(actions={"delete": ActionOptions(label="Trash it")})
        delete = BaseDecorator(articles, admin, options).get_actions()["delete"]

        assert delete.label == "Trash it"
        assert delete.icon == "icon-trash"
        assert delete.id == "delete"

    def test_custom_action(self, articles, admin):
        def handler(request, response, view):
            return "PUBLISH ACTION WORKS"

        options = ResourceOptions(
            actions={
                "publish": ActionOptions(
                    id="publish", icon="fas fa-share", label="Publish", enable=["list", "show"], handler=handler
                )
            }
        )
        decorator = BaseDecorator(articles, admin, options)

        assert decorator.get_actions()["publish"].handler is handler
        assert "publish" in [a.id for a in decorator.actions_for("show")]
        assert "publish" not in [a.id for a in decorator.actions_for("edit")]

    def test_custom_action_defaults_id_and_label(self, articles, admin):
        options = ResourceOptions(actions={"mark_read": ActionOptions()})
        action = BaseDecorator(articles, admin, options).get_actions()["mark_read"]

        assert action.id == "mark_read"
        assert action.label == "Mark Read"
        assert action.enable is True

    def test_actions_for_view(self, articles, admin):
        ids = [a.id for a in BaseDecorator(articles, admin).actions_for("list")]
        assert ids == ["new", "edit", "show", "delete"]


class TestToJson:
    def test_summary_shape(self, articles, admin):
        summary = BaseDecorator(articles, admin, ResourceOptions(name="Posts")).to_json()

        assert summary["id"] == "articles"
        assert summary["name"] == "Posts"
        assert summary["parent"]["name"] == "blog"
        assert {a["id"] for a in summary["actions"]} == {"new", "edit", "show", "delete"}
        assert summary["show_properties"][1]["is_title"] is True

    def test_decorate_requires_assignment(self, articles):
        with pytest.raises(ConfigurationError, match="has not been assigned"):
            articles.decorate()
