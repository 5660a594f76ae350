import subprocess
from pathlib import Path
from typing import Optional, Sequence
from urllib.parse import urlparse

import httpx
from loguru import logger

from ..config import Config


class TemplateRepositorySync:
    """Keeps the template directory in line with a git repository.

    An absent directory is cloned; an existing one is fetched and hard-reset
    to the remote branch. A failed reachability check is only a warning, git
    still runs. Git failures are logged and reported as False.
    """

    def __init__(self, branch: Optional[str] = None, timeout: Optional[int] = None):
        self.branch = branch or Config.TEMPLATE_BRANCH
        self.timeout = timeout or Config.SYNC_TIMEOUT

    def _run(self, cmd: Sequence[str], cwd: Optional[Path] = None) -> bool:
        logger.info(f"[sync] executing: {' '.join(cmd)}")
        try:
            res = subprocess.run(
                list(cmd),
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            logger.error(f"[sync] command not found: {cmd[0]} ({e})")
            return False
        except subprocess.TimeoutExpired:
            logger.error(f"[sync] timed out after {self.timeout}s: {' '.join(cmd)}")
            return False

        if res.stdout.strip():
            logger.debug(f"[sync] stdout: {res.stdout.strip()}")
        if res.returncode != 0:
            logger.error(f"[sync] exit {res.returncode}: {res.stderr.strip()}")
            return False
        return True

    def probe_repository(self, repo_url: str) -> bool:
        """Check that an http(s) repository host answers; other schemes pass."""
        if urlparse(repo_url).scheme not in {"http", "https"}:
            return True
        try:
            with httpx.Client(timeout=min(self.timeout, 10), follow_redirects=True) as client:
                response = client.head(repo_url)
        except httpx.HTTPError as exc:
            logger.warning(f"[sync] template repository unreachable: {repo_url} ({exc})")
            return False
        if response.status_code >= 500:
            logger.warning(f"[sync] template repository answered {response.status_code}: {repo_url}")
            return False
        return True

    def clone(self, template_path: Path, repo_url: str) -> bool:
        template_path.parent.mkdir(parents=True, exist_ok=True)
        ok = self._run(["git", "clone", repo_url, str(template_path)])
        if not ok:
            logger.error(f"[sync] error while cloning adr template: {repo_url}")
        return ok

    def update(self, template_path: Path) -> bool:
        ok = self._run(["git", "fetch", "origin"], cwd=template_path) and self._run(
            ["git", "reset", "--hard", f"origin/{self.branch}"], cwd=template_path
        )
        if not ok:
            logger.error(f"[sync] error while updating adr template in {template_path}")
        return ok

    def sync(self, template_path: Path, repo_url: str) -> bool:
        template_path = Path(template_path)
        if not self.probe_repository(repo_url):
            logger.warning(f"[sync] trying git anyway for {repo_url}")
        if template_path.exists():
            return self.update(template_path)
        return self.clone(template_path, repo_url)
