"""
Basic usage example for apifilter.
"""

from apifilter import ApiFilter, FilterKind, InvalidArgumentError


def main():
    print("=" * 60)
    print("apifilter Basic Usage Example")
    print("=" * 60)

    api_filter = ApiFilter()

    # 1. Decoded query string:
    #    ?name=Jon&age[gte]=18&age[lt]=30&id[in][]=1&id[in][]=2&(zone,bucket)=(lmc,all)
    print("\n1. Parsing query parameters...")
    filters = api_filter.parse_parameters({
        "name": "Jon",
        "age": {"gte": 18, "lt": 30},
        "id": {"in": [1, 2]},
        "(zone,bucket)": "(lmc,all)",
    })
    for f in filters:
        print(f"   {f}")

    # 2. Build a WHERE clause
    print("\n2. Building SQL...")
    clauses = []
    for f in filters:
        if f.kind == FilterKind.MEMBERSHIP:
            placeholders = ", ".join(f":{name}" for name in f.prepared_values())
            clauses.append(f"{f.column} IN ({placeholders})")
        else:
            clauses.append(f"{f.column} {f.symbol} :{f.title}")
    print(f"   WHERE {' AND '.join(clauses)}")
    print(f"   Parameters: {filters.get_prepared_values()}")

    # 3. Custom operators
    print("\n3. Registering a custom operator...")
    api_filter.register_operator("ne", "!=")
    print(f"   {api_filter.parse_parameters({'status': {'ne': 'archived'}})[0]}")

    # 4. Invalid parameters
    print("\n4. Invalid parameters...")
    for parameters in (
        {"(id, name)": "(foo)"},
        {"(col1, col2)": "value"},
        {"column": {"unknown": "value"}},
    ):
        try:
            api_filter.parse_parameters(parameters)
        except InvalidArgumentError as e:
            print(f"   {parameters} -> {e}")


if __name__ == "__main__":
    main()
