class BrewbookError(Exception):
    pass


class ConfigError(BrewbookError):
    pass


class CatalogError(BrewbookError):
    pass


class RecipeNotFoundError(BrewbookError):
    pass


class NoteStoreError(BrewbookError):
    pass
