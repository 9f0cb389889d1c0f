"""
Remote backend initializers.
The bootstrap awaits exactly one initialize() call before mounting the UI.
"""

import asyncio
import json
import logging
import urllib.error
import urllib.request
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pitodo.core.bootstrap import BootstrapError


@dataclass(frozen=True)
class BackendOptions:
    """Platform options handed to the backend initializer"""

    project_id: str = ""
    app_id: str = ""
    api_key: str = ""
    health_url: str = ""
    timeout: float = 5.0

    @classmethod
    def from_config(cls, section: Dict[str, Any]) -> 'BackendOptions':
        return cls(
            project_id=str(section.get('project_id') or ''),
            app_id=str(section.get('app_id') or ''),
            api_key=str(section.get('api_key') or ''),
            health_url=str(section.get('health_url') or ''),
            timeout=float(section.get('timeout', 5.0)),
        )


class BackendInitializer(ABC):
    """Abstract base class for remote backend initializers"""

    @abstractmethod
    async def initialize(self, options: BackendOptions):
        """Connect to the backend; raise on failure"""
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass


class HttpBackendInitializer(BackendInitializer):
    """Checks the options and probes the backend's health endpoint over HTTP"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    async def initialize(self, options: BackendOptions):
        if not options.project_id:
            raise BootstrapError('misconfigured', "Backend project_id is not set")
        if not options.health_url.startswith(('http://', 'https://')):
            raise BootstrapError('misconfigured', f"Invalid backend health_url: {options.health_url!r}")

        # urlopen blocks, keep it off the event loop
        info = await asyncio.to_thread(self._probe, options)
        self.logger.info(f"Backend {options.project_id} reachable: {info}")

    def _probe(self, options: BackendOptions) -> Dict[str, Any]:
        headers = {'Accept': 'application/json'}
        if options.api_key:
            headers['Authorization'] = f"Bearer {options.api_key}"
        if options.app_id:
            headers['X-App-Id'] = options.app_id

        req = urllib.request.Request(options.health_url, headers=headers, method='GET')
        try:
            with urllib.request.urlopen(req, timeout=options.timeout) as response:
                body = response.read().decode() or '{}'
        except urllib.error.HTTPError as e:
            raise BootstrapError('unreachable', f"Backend returned HTTP {e.code}") from e
        except (urllib.error.URLError, OSError) as e:
            raise BootstrapError('unreachable', f"Backend unreachable at {options.health_url}: {e}") from e

        try:
            return json.loads(body)
        except ValueError:
            return {'raw': body[:80]}

    def get_name(self) -> str:
        return "HTTP"


class StaticBackendInitializer(BackendInitializer):
    """Offline initializer for development: succeeds, or fails with a fixed message"""

    def __init__(self, fail_message: Optional[str] = None):
        self.fail_message = fail_message
        self.calls = 0

    async def initialize(self, options: BackendOptions):
        self.calls += 1
        await asyncio.sleep(0)
        if self.fail_message:
            raise BootstrapError('unreachable', self.fail_message)

    def get_name(self) -> str:
        return "Static"


def create_initializer(section: Dict[str, Any]) -> BackendInitializer:
    """
    Build the initializer named by backend.kind

    Args:
        section: The 'backend' config section

    Raises:
        ValueError: For an unknown kind
    """
    kind = str(section.get('kind', 'http')).lower()
    if kind == 'http':
        return HttpBackendInitializer()
    if kind == 'static':
        return StaticBackendInitializer(section.get('fail_message'))
    raise ValueError(f"Unknown backend kind: {kind}")
