from zomescaffold.definitions import AgentReference, EntryTypeReference
from zomescaffold.link_type import link_type_module_header, link_type_name


def test_entry_to_entry():
    name = link_type_name(EntryTypeReference("Post", False), EntryTypeReference("Comment", False))
    assert name == "PostToComments"


def test_agent_to_entry():
    name = link_type_name(AgentReference("creator"), EntryTypeReference("Post", False))
    assert name == "CreatorToPosts"


def test_hash_kind_does_not_change_name():
    a = link_type_name(EntryTypeReference("Post", True), EntryTypeReference("Comment", True))
    b = link_type_name(EntryTypeReference("Post", False), EntryTypeReference("Comment", False))
    assert a == b


def test_plural_source_is_singularized():
    a = link_type_name(EntryTypeReference("Posts", False), EntryTypeReference("Comment", False))
    b = link_type_name(EntryTypeReference("Post", False), EntryTypeReference("Comment", False))
    assert a == b


def test_plural_target_kept():
    a = link_type_name(EntryTypeReference("Post", False), EntryTypeReference("Comments", False))
    b = link_type_name(EntryTypeReference("Post", False), EntryTypeReference("Comment", False))
    assert a == b


def test_name_contains_separator():
    name = link_type_name(AgentReference("creator"), AgentReference("creator"))
    assert "To" in name
    assert name.startswith("Creator")


def test_module_header():
    header = link_type_module_header("PostToComments")
    assert header == "pub mod post_to_comments;\npub use post_to_comments::*;\n\n"


def test_module_header_shape():
    header = link_type_module_header("CreatorToPosts")
    lines = header.split("\n")
    assert lines[0].startswith("pub mod ")
    assert lines[1].startswith("pub use ")
    assert lines[0][len("pub mod "):-1] == lines[1][len("pub use "):-len("::*;")]
    assert header.endswith("\n\n")