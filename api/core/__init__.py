"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings). Keep the relation engine in `relations/` and the
entity catalog in `entities/`.
"""
