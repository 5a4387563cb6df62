"""Permissions Management"""
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml


class PermissionsManager:
    """Manages role-to-permissions mapping from permissions.yml"""

    def __init__(self, permissions_file_path: Optional[Path] = None):
        if permissions_file_path is None:
            permissions_file_path = Path(__file__).parent / "permissions.yml"

        self.role_permissions = self._load_permissions(permissions_file_path)

    def _load_permissions(self, file_path: Path) -> Dict[str, List[str]]:
        """Load role-to-permissions mapping from YAML file"""
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return data.get("roles", {})

    def get_permissions_for_role(self, role: str) -> List[str]:
        return list(self.role_permissions.get(role, []))

    def has_permission(self, role: str, permission: str) -> bool:
        return permission in self.role_permissions.get(role, [])


@lru_cache
def get_permissions_manager() -> PermissionsManager:
    return PermissionsManager()
