class CatalogError(ValueError):
    """Question catalog is empty or malformed; the bot cannot start."""
