"""
repositories/ - Data Access Layer
==================================
`Repository` is the generic in-memory keyed store every demo builds on.
`InventoryLogger` adds whole-collection JSON save/load on top of it.
Operations return `Result` values instead of raising on expected failures.
"""
