"""Nested loop scopes for a tiny template renderer.

Shows the pattern scopeview exists for: each loop body gets a child scope
with its own $index, inner loops shadow outer loop variables, and $parent
reaches the enclosing iteration without any copying.

Logging is enabled at DEBUG to show where writes are placed.
"""

import logging
import re

from scopeview import ScopeView, create_view

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
logging.getLogger("scopeview").setLevel(logging.INFO)

_PLACEHOLDER = re.compile(r"\{([$\w.]+)\}")


def render(template: str, scope: ScopeView) -> str:
    """Replace {name} and {$parent.name} placeholders from scope."""

    def substitute(match: re.Match[str]) -> str:
        value: object = scope
        for part in match.group(1).split("."):
            value = value[part]  # type: ignore[index]
        return str(value)

    return _PLACEHOLDER.sub(substitute, template)


menu = {
    "restaurant": "Blue Door",
    "sections": [
        {"name": "Starters", "dishes": ["Soup", "Salad"]},
        {"name": "Mains", "dishes": ["Risotto"]},
    ],
}

root = create_view(menu)
for section_index, section in enumerate(root["sections"]):
    section_scope = root.child(section, {"$index": section_index})
    print(render("{$index}. {name} at {restaurant}", section_scope))
    for dish_index, dish in enumerate(section_scope["dishes"]):
        dish_scope = section_scope.child({"dish": dish}, {"$index": dish_index})
        print(render("   {$parent.$index}.{$index} {dish} ({name})", dish_scope))
        # New key: lands on the dish scope's own target.
        dish_scope["served"] = dish_scope.get("served", 0) + 1

print(menu.get("served"), root["sections"][0].get("served"))
# Output: None None
# "served" did not exist anywhere, so each dish scope created it locally.

logging.getLogger("scopeview").setLevel(logging.DEBUG)
root["restaurant"] = "Green Door"
print(render("{restaurant}", root))
# Output: Green Door
