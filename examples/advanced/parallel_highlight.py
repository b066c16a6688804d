"""Free-threading safe — highlight 1000 blocks in parallel."""

from concurrent.futures import ThreadPoolExecutor

from decklight import highlight

blocks = [f"message M{i} {{ required int32 id = {i}; }}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda code: highlight(code, "protobuf"), blocks))

print(f"Highlighted {len(results)} blocks in parallel")
print("Last block:", results[-1])
