import pytest

from zomescaffold.definitions import (
    AgentReference,
    Cardinality,
    EntryDefinition,
    EntryTypeReference,
    FieldDefinition,
    FieldKind,
    FieldType,
)
from zomescaffold.dependencies import (
    create_entry_argument,
    dependency_validation,
    entry_type_dependencies,
)


def _field(name, kind, cardinality=Cardinality.SINGLE, linked_from=None):
    return FieldDefinition(
        field_name=name,
        field_type=FieldType(kind),
        widget=None,
        cardinality=cardinality,
        linked_from=linked_from,
    )


@pytest.fixture
def comment_def():
    post_ref = EntryTypeReference("Post", False)
    tag_ref = EntryTypeReference("Tag", True)
    return EntryDefinition(
        name="comment",
        fields=[
            _field("content", FieldKind.STRING),
            _field("post_hash", FieldKind.ACTION_HASH, linked_from=post_ref),
            _field("author", FieldKind.AGENT_PUB_KEY, linked_from=AgentReference("author")),
            _field("tag_hashes", FieldKind.ENTRY_HASH, Cardinality.VECTOR, tag_ref),
        ],
    )


def test_dependencies_only_entry_type_links_in_order(comment_def):
    deps = entry_type_dependencies(comment_def)
    assert [f.field_name for f, _ in deps] == ["post_hash", "tag_hashes"]
    assert [r.entry_type for _, r in deps] == ["Post", "Tag"]
    for field_def, reference in deps:
        assert field_def.linked_from == reference


def test_no_dependencies_for_plain_entry():
    entry = EntryDefinition(name="post", fields=[_field("title", FieldKind.STRING)])
    assert entry_type_dependencies(entry) == []
    assert create_entry_argument(entry) == "_" + entry.name


def test_agent_link_is_not_a_dependency():
    entry = EntryDefinition(
        name="post",
        fields=[_field("author", FieldKind.AGENT_PUB_KEY, linked_from=AgentReference("author"))],
    )
    assert entry_type_dependencies(entry) == []
    assert create_entry_argument(entry).startswith("_")


def test_create_argument_used_when_dependencies(comment_def):
    assert create_entry_argument(comment_def) == comment_def.name


def test_single_action_hash_validation():
    reference = EntryTypeReference("Post", False)
    field_def = _field("post_hash", FieldKind.ACTION_HASH, linked_from=reference)
    text = dependency_validation(field_def, reference, "comment")
    assert "must_get_valid_record(comment.post_hash.clone())?;" in text
    assert "Dependant action must be accompanied by an entry" in text
    assert "crate::Post" in text
    assert "must_get_entry" not in text


def test_single_entry_hash_validation():
    reference = EntryTypeReference("Post", True)
    field_def = _field("post_hash", FieldKind.ENTRY_HASH, linked_from=reference)
    text = dependency_validation(field_def, reference, "comment")
    assert "must_get_entry(comment.post_hash.clone())?;" in text
    assert "try_from(entry)?;" in text
    assert "must_get_valid_record" not in text


@pytest.mark.parametrize("entry_hash", [False, True])
@pytest.mark.parametrize(
    "cardinality, opening",
    [(Cardinality.OPTION, "if let Some("), (Cardinality.VECTOR, "for ")],
)
def test_wrapped_validation(entry_hash, cardinality, opening):
    reference = EntryTypeReference("Post", entry_hash)
    kind = FieldKind.ENTRY_HASH if entry_hash else FieldKind.ACTION_HASH
    field_def = _field("post_hashes", kind, cardinality, reference)
    text = dependency_validation(field_def, reference, "comment")
    hash_var = "entry_hash" if entry_hash else "action_hash"
    assert text.startswith(opening)
    assert hash_var in text.splitlines()[0]
    assert "comment.post_hashes.clone()" in text.splitlines()[0]
    fetch = "must_get_entry" if entry_hash else "must_get_valid_record"
    assert f"{fetch}({hash_var})?;" in text
    assert text.count("{") == text.count("}")
    assert text.rstrip().endswith("}")


def test_dependant_names_follow_reference_case():
    reference = EntryTypeReference("BlogPost", False)
    field_def = _field("blog_post_hash", FieldKind.ACTION_HASH, linked_from=reference)
    text = dependency_validation(field_def, reference, "comment")
    assert "let _blog_post: crate::BlogPost" in text


def test_validation_is_balanced_for_all_dependencies(comment_def):
    arg = create_entry_argument(comment_def)
    for field_def, reference in entry_type_dependencies(comment_def):
        text = dependency_validation(field_def, reference, arg)
        assert text.count("(") == text.count(")")
        assert text.count("{") == text.count("}")
        assert f"{arg}.{field_def.field_name}.clone()" in text