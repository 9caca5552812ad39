"""
Error reporting demonstration for bigjson.
"""

import bigjson
from bigjson import ScanError, TypeMismatchError


def read_all(text):
    cursor = bigjson.create_reader(text)
    while bigjson.scan(cursor).kind != bigjson.Kind.ERROR and cursor.depth:
        pass
    return cursor


def main():
    print("bigjson - Error Reporting Demo")
    print("=" * 31)

    # Example 1: Sticky errors
    print("\n1. Unclosed String")
    cursor = read_all('{"key": "value}')
    try:
        cursor.raise_for_error()
    except ScanError as e:
        print("Error recorded:")
        print(str(e))

    # Example 2: Multiline error with location
    print("\n2. Multiline JSON Error")
    multiline_json = '''{
    "name": "John Doe",
    "age": 30,
    "city": New York
}'''
    cursor = read_all(multiline_json)
    print(f"Kind: {cursor.error.kind.name}")
    print(str(cursor.error))

    # Example 3: Missing value
    print("\n3. Key Without Value")
    cursor = bigjson.create_reader('{"a": 1, "b"}')
    root = bigjson.scan(cursor)
    pairs = list(bigjson.object_iterator(cursor, root))
    print(f"Pairs read: {len(pairs)}")
    print(str(cursor.error))

    # Example 4: Wrong accessor
    print("\n4. Type Mismatch")
    cursor = bigjson.create_reader("42")
    value = bigjson.scan(cursor)
    try:
        bigjson.as_string(cursor, value)
    except TypeMismatchError as e:
        print(f"Error caught: {e}")


if __name__ == "__main__":
    main()
