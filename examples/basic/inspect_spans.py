"""Look at the raw spans behind the markup."""

from decklight import classify

source = 'optional string greeting = "hello";'

for span in classify(source):
    print(f"{span.category.value:<8} {span.start_offset:>3}:{span.end_offset:<3} {span.text!r}")

# Spans always reassemble into the input
assert "".join(span.text for span in classify(source)) == source
