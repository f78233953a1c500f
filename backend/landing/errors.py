from flask import current_app, jsonify
from landing.domain.exceptions import LandingError, ValidationRejected

def register_error_handlers(app):
    @app.errorhandler(LandingError)
    def handle_landing_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(ValidationRejected)
    def handle_validation_rejected(error):
        current_app.logger.info("Rejected value for %s: %s", error.key, error.reason)
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response
