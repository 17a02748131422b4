"""Quickstart example for scopeview.

Demonstrates reading through a scope chain, contextual variables, write
placement and the reserved accessors.
"""

from scopeview import ReservedAssignmentError, create_view

# Example 1: Reading through a chain
print("=" * 50)
print("Example 1: Reading Through a Chain")
print("=" * 50)

page = {"title": "Orders", "currency": "EUR"}
order = {"id": 1042, "total": 99.5}

page_scope = create_view(page)
order_scope = create_view(order, page_scope)

print(order_scope["id"], order_scope["total"], order_scope["currency"])
# Output: 1042 99.5 EUR

print("title" in order_scope, "missing" in order_scope)
# Output: True False

# Example 2: Contextual variables
print("\n" + "=" * 50)
print("Example 2: Contextual Variables")
print("=" * 50)

row_scope = create_view({"sku": "A-1"}, order_scope, {"$index": 0, "$first": True})
print(row_scope["$index"], row_scope["$first"], row_scope["sku"], row_scope["title"])
# Output: 0 True A-1 Orders

# Example 3: Where writes land
print("\n" + "=" * 50)
print("Example 3: Where Writes Land")
print("=" * 50)

row_scope["currency"] = "USD"  # existing on the page: updated there
row_scope["note"] = "gift"  # new plain key: created on the row's target
row_scope["$last"] = False  # new contextual variable: row overlay only

print(page)
# Output: {'title': 'Orders', 'currency': 'USD'}
print(row_scope["$this"])
# Output: {'sku': 'A-1', 'note': 'gift'}
print(row_scope["$contextual"])
# Output: {'$index': 0, '$first': True, '$last': False}

# Example 4: Reserved accessors
print("\n" + "=" * 50)
print("Example 4: Reserved Accessors")
print("=" * 50)

print(row_scope["$parent"] is order_scope)
# Output: True
print(len(row_scope["$parents"]))
# Output: 2

try:
    row_scope["$parent"] = page_scope
except ReservedAssignmentError as e:
    print(e)
# Output:
# error[RESERVED_ASSIGNMENT]: Cannot assign to reserved key '$parent'
#   = key: $parent
#   = help: $contextual, $parent, $parents, $this are read-only; ...
#   = note: see docs/errors.md#reserved-assignment

# Example 5: Where did a value come from?
print("\n" + "=" * 50)
print("Example 5: Provenance")
print("=" * 50)

for key in ("$index", "sku", "id", "currency"):
    found = row_scope.lookup(key)
    assert found is not None
    print(f"{key}: {found.value!r} from {found.origin} at depth {found.depth}")
# Output:
# $index: 0 from contextual at depth 0
# sku: 'A-1' from target at depth 0
# id: 1042 from target at depth 1
# currency: 'USD' from target at depth 2
