class AssetOrgError(Exception):
    """Base error for the project."""

class InvalidPathError(AssetOrgError):
    pass

class BackupError(AssetOrgError):
    pass

class InsufficientSpaceError(BackupError):
    pass

class MoveError(AssetOrgError):
    pass
