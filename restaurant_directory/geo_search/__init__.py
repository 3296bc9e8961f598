"""
Geo-radius search flow.

- ``validation`` turns raw request values into a ``SearchQuery``.
- ``gateway`` runs the page and count queries against the backend.
- ``assembler`` builds the paginated envelope.
- ``controller`` drives searches and page changes from the client side.
"""
