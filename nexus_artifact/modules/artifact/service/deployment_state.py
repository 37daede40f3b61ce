"""Report which version a deployment root currently points at."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from nexus_artifact.exceptions import LinkResolutionFailure
from nexus_artifact.modules.artifact.domain.constants import CURRENT_LINK_NAME
from nexus_artifact.modules.artifact.platform import FileOps


class DeploymentStateReader:
    """Read ``<root>/current``; the link target's last component is the version.

    Only reads. The link is maintained by the deploy process.
    """

    def __init__(self, file_ops: FileOps) -> None:
        self.file_ops = file_ops
        self.log = logging.getLogger(self.__class__.__name__)

    def current_version(self, deploy_root: Union[str, Path]) -> Optional[str]:
        current = Path(deploy_root) / CURRENT_LINK_NAME
        if not os.path.lexists(current):
            self.log.debug("No %s link under %s", CURRENT_LINK_NAME, deploy_root)
            return None

        try:
            if not self.file_ops.is_symlink(current):
                raise LinkResolutionFailure(str(current), "not a symbolic link")
            if not current.exists():
                raise LinkResolutionFailure(str(current), "link target does not exist")
            target = self.file_ops.resolve_symlink(current)
        except OSError as exc:
            raise LinkResolutionFailure(str(current), exc.strerror or str(exc)) from exc

        if not target.name:
            raise LinkResolutionFailure(str(current), f"link target '{target}' has no name")
        return target.name
