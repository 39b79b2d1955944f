import pytest

from zomescaffold.definitions import EntryDefinition
from zomescaffold.validation_arms import (
    entry_type_variant,
    entry_types_enum_item,
    integrity_module_header,
    register_delete_arm,
    register_update_arm,
    store_entry_create_arm,
    store_entry_update_arm,
    store_record_create_arm,
    store_record_delete_arm,
    store_record_update_arm,
)

ALL_ARMS = [
    store_record_create_arm,
    store_record_update_arm,
    store_record_delete_arm,
    store_entry_create_arm,
    store_entry_update_arm,
    register_update_arm,
    register_delete_arm,
]


@pytest.fixture
def post():
    return EntryDefinition(name="post")


@pytest.fixture
def blog_post():
    return EntryDefinition(name="blog_post")


def test_entry_types_enum_item_declares_empty_enum():
    item = entry_types_enum_item()
    assert item.endswith("pub enum EntryTypes {}")
    assert "#[hdk_entry_defs]" in item
    assert "#[unit_enum(UnitEntryTypes)]" in item
    assert item.splitlines()[0] == "#[derive(Serialize, Deserialize)]"


def test_entry_type_variant(blog_post):
    assert entry_type_variant(blog_post) == "BlogPost(BlogPost)"


def test_integrity_module_header(blog_post):
    assert integrity_module_header(blog_post) == "pub mod blog_post;\npub use blog_post::*;\n\n"


def test_store_record_create_arm(post):
    assert store_record_create_arm(post) == (
        "EntryTypes::Post(post) => "
        "validate_create_post(EntryCreationAction::Create(action), post),"
    )


def test_store_entry_create_matches_store_record_create(blog_post):
    assert store_entry_create_arm(blog_post) == store_record_create_arm(blog_post)


def test_store_entry_update_arm_uses_update_action(blog_post):
    arm = store_entry_update_arm(blog_post)
    assert "EntryCreationAction::Update(action)" in arm
    assert arm == store_entry_create_arm(blog_post).replace("Create(action)", "Update(action)")


def test_store_record_delete_arm(post):
    assert store_record_delete_arm(post) == (
        "EntryTypes::Post(original_post) => "
        "validate_delete_post(action, original_action, original_post),"
    )


def test_register_delete_arm(post):
    assert register_delete_arm(post) == (
        "EntryTypes::Post(post) => validate_delete_post(action, original_action, post),"
    )


def test_register_update_arm(blog_post):
    arm = register_update_arm(blog_post)
    first, second = arm.split("\n")
    assert first.startswith("(EntryTypes::BlogPost(blog_post), EntryTypes::BlogPost(original_blog_post))")
    assert second.strip() == (
        "validate_update_blog_post(action, blog_post, original_action, original_blog_post),"
    )


def test_store_record_update_arm_structure(blog_post):
    arm = store_record_update_arm(blog_post)
    assert arm.startswith("EntryTypes::BlogPost(blog_post) => {")
    assert arm.endswith("},")
    assert arm.count("{") == arm.count("}")
    assert "let original_blog_post: Option<BlogPost>" in arm
    assert (
        "validate_update_blog_post(action, blog_post, original_action, original_blog_post)"
        in arm
    )
    assert "The updated entry type must be the same as the original entry type" in arm


@pytest.mark.parametrize("render", ALL_ARMS)
def test_every_arm_ends_with_comma_and_uses_names(render, blog_post):
    arm = render(blog_post)
    assert arm.endswith(",")
    assert "EntryTypes::BlogPost(" in arm
    assert "_blog_post(" in arm


@pytest.mark.parametrize("render", ALL_ARMS)
def test_arms_are_case_insensitive_to_name_style(render):
    assert render(EntryDefinition(name="BlogPost")) == render(EntryDefinition(name="blog_post"))