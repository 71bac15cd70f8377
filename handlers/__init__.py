"""
handlers/ - Presentation Layer
================================
Console drivers, one per demo. Each driver seeds sample data, delegates
to the appropriate Service, prints the results, and logs every failed
`Result` with its category tag before carrying on.
No business logic lives here.
"""
