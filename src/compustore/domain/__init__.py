"""Domain layer for compustore application.

Services live in their own modules (``compustore.domain.product`` and so on)
and are imported from there; this package stays import-light so that the
database layer can depend on ``compustore.domain.entities`` without cycles.
"""
