"""
Flask web server for PiTodo.
Provides the input surface for the device:
- Creation form and list page
- JSON API for todos (see apps/todo/routes.py)
- The currently displayed frame as PNG
"""

from flask import Flask, render_template_string, request, redirect, url_for, Response
import logging
import threading

from pitodo.apps.todo.routes import todo_bp, init_routes
from pitodo.models.todo import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Priority


class TodoWebServer:
    """
    Web server for entering and viewing todos
    """

    def __init__(self, app_instance, host: str = '0.0.0.0', port: int = 5000):
        """
        Initialize web server

        Args:
            app_instance: TodoApp instance
            host: Interface to bind
            port: Port to run server on
        """
        self.logger = logging.getLogger(__name__)
        self.app_instance = app_instance
        self.host = host
        self.port = port
        self.flask_app = Flask(__name__)

        self._setup_routes()

    def _setup_routes(self):
        """Setup Flask routes"""

        @self.flask_app.route('/')
        def index():
            """Form and list page, or the initialization error"""
            if self.app_instance.todo_manager is None:
                return self._error_page()

            manager = self.app_instance.todo_manager
            scheme = self.app_instance.theme.current_color_scheme()
            return render_template_string(
                HTML_TEMPLATE,
                form=manager.form.state,
                records=manager.records(),
                priorities=Priority.labels(),
                title_max=TITLE_MAX_LENGTH,
                description_max=DESCRIPTION_MAX_LENGTH,
                primary='#%02x%02x%02x' % scheme.primary,
                error_color='#%02x%02x%02x' % scheme.error,
            )

        @self.flask_app.route('/submit', methods=['POST'])
        def submit():
            """HTML form submission"""
            manager = self.app_instance.todo_manager
            if manager is None:
                return self._error_page()

            result = manager.form.submit(
                request.form.get('title'),
                request.form.get('description'),
                request.form.get('priority'),
            )
            if not result.ok:
                manager.refresh_screen()
            return redirect(url_for('index'))

        @self.flask_app.route('/screen.png')
        def screen():
            """Currently displayed frame"""
            data = self.app_instance.display.get_png_bytes()
            if data is None:
                return Response(status=404)
            return Response(data, mimetype='image/png')

    def _error_page(self):
        """Initialization error page, served while no home screen is mounted"""
        error_screen = self.app_instance.error_screen
        return render_template_string(
            ERROR_TEMPLATE,
            message=error_screen.message if error_screen else "The app is still starting",
            detail=error_screen.detail if error_screen else "",
        ), 503

    def register_todo_routes(self, manager):
        """Expose the JSON API once the home screen is mounted"""
        init_routes(manager)
        self.flask_app.register_blueprint(todo_bp)

    def run(self):
        """Start the web server in a separate thread"""
        thread = threading.Thread(target=self._run_server, daemon=True)
        thread.start()
        self.logger.info(f"Web server started on port {self.port}")

    def _run_server(self):
        """Internal method to run Flask server"""
        # Single request thread: all store mutations and renders happen here
        self.flask_app.run(host=self.host, port=self.port, debug=False, use_reloader=False, threaded=False)


# HTML Template for the web interface
HTML_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>Todo App</title>
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
        body {
            font-family: Arial, sans-serif;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f5f5;
        }
        h1 {
            color: {{ primary }};
            text-align: center;
        }
        .section {
            background: white;
            padding: 16px;
            margin: 20px 0;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }
        .field {
            margin-bottom: 12px;
        }
        .field input, .field select {
            width: 100%;
            padding: 8px;
            box-sizing: border-box;
        }
        .error {
            color: {{ error_color }};
            font-size: 12px;
        }
        .btn {
            padding: 12px 20px;
            font-size: 16px;
            border: none;
            border-radius: 5px;
            cursor: pointer;
            background: {{ primary }};
            color: white;
        }
        .todo {
            display: flex;
            align-items: center;
            border-radius: 8px;
            margin: 8px 0;
            overflow: hidden;
        }
        .todo .body {
            flex: 1;
            padding: 10px;
        }
        .todo .title {
            font-size: 20px;
            font-weight: bold;
        }
        .todo .chip {
            padding: 24px 12px;
            min-width: 70px;
            text-align: center;
        }
    </style>
</head>
<body>
    <h1>Todo App</h1>

    <div class="section">
        <form action="/submit" method="post">
            <div class="field">
                <input type="text" name="title" placeholder="Title" maxlength="{{ title_max }}" value="{{ form.title }}">
                {% if form.error_for('title') %}<div class="error">{{ form.error_for('title') }}</div>{% endif %}
            </div>
            <div class="field">
                <input type="text" name="description" placeholder="Description" maxlength="{{ description_max }}" value="{{ form.description }}">
                {% if form.error_for('description') %}<div class="error">{{ form.error_for('description') }}</div>{% endif %}
            </div>
            <div class="field">
                <select name="priority">
                    {% for label in priorities %}
                    <option value="{{ label }}" {% if label == form.priority_label %}selected{% endif %}>{{ label }}</option>
                    {% endfor %}
                </select>
                {% if form.error_for('priority') %}<div class="error">{{ form.error_for('priority') }}</div>{% endif %}
            </div>
            <button class="btn" type="submit">Add</button>
        </form>
    </div>

    <div class="section">
        {% for record in records %}
        <div class="todo" style="background: {{ record.to_dict().color }}80;">
            <div class="body">
                <div class="title">{{ record.label }}</div>
                <div>{{ record.description }}</div>
            </div>
            <div class="chip" style="background: {{ record.to_dict().color }};">{{ record.priority_label }}</div>
        </div>
        {% else %}
        <p>No tasks yet</p>
        {% endfor %}
    </div>
</body>
</html>
'''

ERROR_TEMPLATE = '''
<!DOCTYPE html>
<html>
<head>
    <title>Todo App</title>
    <meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body style="font-family: Arial, sans-serif; text-align: center; padding-top: 80px;">
    <p style="color: #c62828; font-size: 16px;">{{ message }}</p>
    {% if detail %}<p style="color: #555; font-size: 12px;">{{ detail }}</p>{% endif %}
</body>
</html>
'''
