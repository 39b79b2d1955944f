"""Generate Rust source text for Holochain zome entry types, link types and CRUD handlers."""

__version__ = "0.1.0"