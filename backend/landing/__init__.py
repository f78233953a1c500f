from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .catalog import default_catalog
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers
from .rendering import build_default_registry
from .runtime import CATALOG_KEY, REGISTRY_KEY
from . import models  # noqa: F401  (registers tables with the metadata)
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development", catalog=None, registry=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Landing services (read-only catalog, renderer map)
    # -------------------------------------------------
    app.extensions[CATALOG_KEY] = catalog if catalog is not None else default_catalog()
    app.extensions[REGISTRY_KEY] = registry if registry is not None else build_default_registry()

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO TENANT)
    # -------------------------------------------------
    @app.route("/openapi/landing.yaml", methods=["GET"], endpoint="openapi_landing")
    def serve_openapi():
        document_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "landing_openapi.yaml",
        )

        if not os.path.exists(document_path):
            raise FileNotFoundError("landing_openapi.yaml not found")

        return send_file(
            document_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/landing.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Landing Composer API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
