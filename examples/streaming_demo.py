"""
Streaming navigation demonstration for bigjson.
"""

import io
import json

import bigjson


def main():
    print("bigjson - Streaming Navigation Demo")
    print("=" * 36)

    # Example 1: Iterate an array
    print("\n1. Array Iteration")
    cursor = bigjson.create_reader("[1, 2, 3]")
    root = bigjson.scan(cursor)
    numbers = [bigjson.as_number(cursor, v) for v in bigjson.array_iterator(cursor, root)]
    print(f"✓ Elements: {numbers}")

    # Example 2: Iterate an object
    print("\n2. Object Iteration")
    cursor = bigjson.create_reader('{"name": "John", "age": 30}')
    root = bigjson.scan(cursor)
    for key, value in bigjson.object_iterator(cursor, root):
        print(f"  {bigjson.as_string(cursor, key)}: {value.kind.name}")

    # Example 3: Pick fields from a large document
    print("\n3. Selecting Fields From Large Data")
    records = [{"id": i, "payload": {"values": list(range(20))}} for i in range(20000)]
    json_string = json.dumps(records)
    print(f"  JSON size: {len(json_string):,} characters")

    cursor = bigjson.load_reader(io.StringIO(json_string))
    root = bigjson.scan(cursor)
    total = 0
    for record in bigjson.array_iterator(cursor, root):
        # Only the first member is read; the payload is skipped
        _, value = next(iter(bigjson.object_iterator(cursor, record)))
        total += int(bigjson.as_number(cursor, value))
    print(f"✓ Sum of ids: {total:,}")

    # Example 4: Abandon a nested value
    print("\n4. Abandoning Nested Values")
    cursor = bigjson.create_reader('{"a": {"b": 1}, "c": true}')
    root = bigjson.scan(cursor)
    keys = [bigjson.as_string(cursor, k) for k, _ in bigjson.object_iterator(cursor, root)]
    print(f"✓ Top-level keys: {keys}, error: {cursor.error}")


if __name__ == "__main__":
    main()
