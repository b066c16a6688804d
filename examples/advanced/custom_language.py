"""Register an extra language next to protobuf."""

from decklight import (
    Grammar,
    HighlightConfig,
    create_registry_with_defaults,
    highlight,
    highlight_config_context,
)

thrift = Grammar.from_words(
    "thrift",
    keywords="struct service required optional",
    literals="i32 i64 string bool",
    aliases=("thr",),
)

builder = create_registry_with_defaults()
builder.register(thrift)
config = HighlightConfig(registry=builder.build(), class_prefix="hl-")

with highlight_config_context(config):
    print(highlight("struct User {\n  1: required i32 id\n}", "thrift", show_linenos=True))
    print(highlight("message Ping {}", "proto"))
