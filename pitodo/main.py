"""
PiTodo - Main Application
Themed to-do list with a bootstrapped remote backend
"""

import sys
import os
import asyncio
import logging
import signal
from typing import Optional

import yaml

from pitodo.apps.todo.manager import TodoManager
from pitodo.apps.todo.screen import ToDoScreen
from pitodo.config import Config, ConfigError
from pitodo.core.backend import BackendOptions, create_initializer
from pitodo.core.bootstrap import AppBootstrap, BootstrapError, BootstrapOutcome, FailurePolicy
from pitodo.display.display_driver import DisplayDriver
from pitodo.models.todo import dummy_todos
from pitodo.ui.error_screen import ErrorScreen
from pitodo.ui.navigation import NavigationManager, Screen
from pitodo.ui.splash_screen import SplashController, SplashScreen
from pitodo.ui.theme import AppTheme
from pitodo.web.webserver import TodoWebServer

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), '../config/config.yaml')


class TodoApp:
    """
    Main To-Do application
    """

    def __init__(self, config: Config, initializer=None):
        """
        Initialize application

        Args:
            config: Loaded configuration
            initializer: Backend initializer (built from the backend section if None)
        """
        self.config = config

        # Setup logging
        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.info("=" * 50)
        self.logger.info("PiTodo starting...")
        self.logger.info("=" * 50)

        width = self.config.get('display.width', 800)
        height = self.config.get('display.height', 480)

        # Built once, shared by every screen
        self.theme = AppTheme.from_mode(self.config.get('theme.mode', 'system'))

        self.display = DisplayDriver(width, height, self.config.get('display.output'))
        self.navigation = NavigationManager(Screen.SPLASH)
        self.splash = SplashController(self.display, SplashScreen(self.theme, width, height))

        self.bootstrap = self._create_bootstrap(initializer)

        self.todo_screen = ToDoScreen(self.theme, width, height)
        self.todo_manager: Optional[TodoManager] = None
        self.error_screen: Optional[ErrorScreen] = None
        self.outcome: Optional[BootstrapOutcome] = None

        self.web_server = TodoWebServer(
            self,
            host=self.config.get('web.host', '0.0.0.0'),
            port=self.config.get('web.port', 5000),
        )
        self.running = False

    def _create_bootstrap(self, initializer=None) -> AppBootstrap:
        """
        Build the bootstrap from the backend and bootstrap sections

        Bad settings do not raise here: they are handed to the bootstrap,
        which fails the launch as misconfigured behind the splash.
        """
        policy = FailurePolicy.FAIL_VISIBLE
        try:
            policy = FailurePolicy(self.config.failure_policy())
            backend = self.config.backend()
            initializer = initializer or create_initializer(backend)
            options = BackendOptions.from_config(backend)
        except ConfigError as e:
            self.logger.error(f"Invalid configuration: {e}")
            return AppBootstrap(self.splash, None, None, policy, config_error=e)

        return AppBootstrap(self.splash, initializer, options, policy)

    def _setup_logging(self):
        """Configure logging"""
        log_level = getattr(logging, str(self.config.get('logging.level', 'INFO')).upper(), logging.INFO)
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        # Console handler
        if self.config.get('logging.console', True):
            handlers.append(logging.StreamHandler())

        # File handler
        log_file = self.config.get('logging.file')
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format=log_format,
            handlers=handlers
        )

    def boot(self) -> BootstrapOutcome:
        """
        Run the bootstrap and mount the resulting root screen

        Returns:
            BootstrapOutcome from the bootstrap
        """
        self.display.initialize()
        self.outcome = asyncio.run(self.bootstrap.run())

        if self.outcome.root_screen == Screen.HOME:
            self._mount_home()
        else:
            self._mount_error(self.outcome.error)

        return self.outcome

    def _mount_home(self):
        try:
            fixtures = dummy_todos() if self.config.get('todo.seed_fixtures', False) else None
            self.todo_manager = TodoManager(self, fixtures)
            self.navigation.navigate_to(Screen.HOME)
            self.render_current_screen()
        except Exception as e:
            self.logger.error(f"Failed to mount home screen: {e}", exc_info=True)
            self.todo_manager = None
            self._mount_error(BootstrapError('unexpected', f"Failed to start the to-do screen: {e}"))
            return

        # JSON API only exists once the home screen is up
        self.web_server.register_todo_routes(self.todo_manager)

    def _mount_error(self, error):
        detail = error.message if error else ""
        self.error_screen = ErrorScreen(self.theme, self.display.width, self.display.height, detail)
        self.navigation.navigate_to(Screen.ERROR)
        self.render_current_screen()

    def render_current_screen(self):
        """Render the mounted root screen to the display"""
        if self.navigation.is_on_screen(Screen.HOME):
            image = self.todo_screen.render(self.todo_manager.records(), self.todo_manager.form.state)
        elif self.navigation.is_on_screen(Screen.ERROR):
            image = self.error_screen.render()
        else:
            self.logger.warning(f"Nothing to render on {self.navigation.current_screen.value}")
            return

        self.display.display_image(image)

    def start(self):
        """Boot, serve the input surface and wait for a shutdown signal"""
        try:
            self.boot()

            self.web_server.run()
            self.logger.info(f"Web interface available at http://<device-ip>:{self.web_server.port}")

            self.running = True
            self.logger.info("PiTodo started successfully!")
            self.logger.info("Press Ctrl+C to exit")

            signal.signal(signal.SIGINT, self._signal_handler)
            signal.signal(signal.SIGTERM, self._signal_handler)
            signal.pause()

        except KeyboardInterrupt:
            self.logger.info("Received interrupt signal")
            self.stop()

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals"""
        self.logger.info(f"Received signal {signum}")
        self.stop()
        sys.exit(0)

    def stop(self):
        """Clean shutdown"""
        self.logger.info("Shutting down...")
        self.running = False

        if self.todo_manager:
            self.todo_manager.teardown()

        self.display.cleanup()
        self.logger.info("PiTodo stopped")


def main():
    """Main entry point"""
    # Determine config path
    if len(sys.argv) > 1:
        config_path = sys.argv[1]
    else:
        config_path = os.environ.get('PITODO_CONFIG', DEFAULT_CONFIG)

    # Ensure config exists
    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}")
        print(f"Usage: {sys.argv[0]} [config_path]")
        sys.exit(1)

    try:
        config = Config(config_path)
    except (ConfigError, yaml.YAMLError) as e:
        print(f"ERROR: Cannot read configuration {config_path}: {e}")
        sys.exit(1)

    app = TodoApp(config)
    app.start()


if __name__ == '__main__':
    main()
