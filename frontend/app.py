# frontend/app.py

from flask import Flask, Response, request

from backend.board import NoSafeRevealError
from backend.config import load_config
from frontend.api import api_blueprint, build_session


def create_app(config_path=None):
    app = Flask(__name__)
    app.config["GRID_CONFIG"] = load_config(config_path)
    app.register_blueprint(api_blueprint, url_prefix="/api")

    @app.route("/")
    def index():
        try:
            session = build_session(request.args)
        except ValueError as exc:
            return Response(f"error: {exc}\n", status=400, mimetype="text/plain")
        try:
            session.generate()
        except NoSafeRevealError:
            return Response("error: no safe reveal available\n", status=422, mimetype="text/plain")
        return Response(session.render() + "\n", mimetype="text/plain")

    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5000, help="Port to run the server on")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host IP")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    app = create_app(args.config)
    print(f"Running on http://{args.host}:{args.port}/")
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
