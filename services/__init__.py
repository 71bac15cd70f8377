"""
services/ - Business Logic Layer
================================
One service per demo. Services sit on top of repositories, return
`Result` values or formatted text, and never print.
"""
