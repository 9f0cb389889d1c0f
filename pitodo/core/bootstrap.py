"""
Application bootstrap.

Runs once at process start:

    STARTING -> REMOTE_INIT_IN_PROGRESS -> READY | FAILED

The splash is preserved before any async work and released exactly once,
whatever the outcome. There is no retry; restarting the process is the
only way to try again.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pitodo.ui.navigation import Screen


class BootstrapError(Exception):
    """
    Initialization failure that is fatal to the current launch

    Args:
        reason: 'unreachable', 'misconfigured' or 'unexpected'
        message: Human readable description
    """

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class BootstrapState(Enum):
    STARTING = "starting"
    REMOTE_INIT_IN_PROGRESS = "remote_init_in_progress"
    READY = "ready"
    FAILED = "failed"


class FailurePolicy(Enum):
    FAIL_VISIBLE = "fail_visible"
    SILENT_DEGRADE = "silent_degrade"


@dataclass(frozen=True)
class BootstrapOutcome:
    state: BootstrapState
    root_screen: Screen
    error: Optional[BootstrapError] = None


class AppBootstrap:
    """
    Ordered startup sequence guarding the remote backend initialization
    """

    def __init__(self, splash, initializer, options, policy: FailurePolicy = FailurePolicy.FAIL_VISIBLE,
                 config_error: Optional[Exception] = None):
        """
        Initialize bootstrap

        Args:
            splash: SplashController bracketing the sequence
            initializer: BackendInitializer to await (may be None with config_error)
            options: BackendOptions passed to the initializer
            policy: What to mount when initialization fails
            config_error: Problem found while reading the startup settings;
                reported as a misconfigured launch instead of initializing
        """
        self.splash = splash
        self.initializer = initializer
        self.options = options
        self.policy = policy
        self.config_error = config_error
        self.state = BootstrapState.STARTING
        self.error: Optional[BootstrapError] = None
        self._started = False
        self.logger = logging.getLogger(__name__)

    async def run(self) -> BootstrapOutcome:
        """
        Execute the startup sequence

        Returns:
            BootstrapOutcome naming the root screen to mount

        Raises:
            RuntimeError: If called more than once
        """
        if self._started:
            raise RuntimeError("Bootstrap already ran")
        self._started = True

        self.splash.preserve()

        try:
            self.state = BootstrapState.REMOTE_INIT_IN_PROGRESS
            if self.config_error is not None:
                raise BootstrapError('misconfigured', str(self.config_error)) from self.config_error
            self.logger.info(f"Starting app initialization ({self.initializer.get_name()} backend)...")
            await self.initializer.initialize(self.options)
            self.logger.info("Remote backend initialized successfully")
        except Exception as e:
            self.error = e if isinstance(e, BootstrapError) else BootstrapError('unexpected', str(e) or type(e).__name__)
            self.state = BootstrapState.FAILED
            self.logger.error(f"Failed to initialize app: {e}", exc_info=True)
        else:
            self.state = BootstrapState.READY
            self.logger.info("Initialization complete")
        finally:
            self.splash.release()

        if self.state == BootstrapState.READY:
            return BootstrapOutcome(self.state, Screen.HOME)

        # A misconfigured launch is always shown, whatever the policy
        if self.policy == FailurePolicy.SILENT_DEGRADE and self.config_error is None:
            self.logger.warning("Continuing without remote backend (silent_degrade policy)")
            return BootstrapOutcome(self.state, Screen.HOME, self.error)

        return BootstrapOutcome(self.state, Screen.ERROR, self.error)
