# Fixed layout of an organized asset tree. Order matters: rules run top to bottom.
from .models import Rule

DEFAULT_RULES = (
    Rule("*.cs", "Scripts"),
    Rule("*.jpeg", "Content/Sprites"),
    Rule("*.png", "Content/Sprites"),
    Rule("*.prefab", "Prefabs"),
    Rule("*.unity", "Scenes"),
)

BACKUP_PATTERN = "*.cs"
BACKUP_ARCHIVE_NAME = "ScriptsBackup.zip"
LOG_FILE_NAME = "OrganizeAssetsLog.txt"
DEFAULT_ASSET_ROOT = "Assets"
META_SUFFIX = ".meta"
