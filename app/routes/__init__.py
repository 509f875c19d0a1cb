from app.routes.category_routes import category_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(category_bp, url_prefix='/api/v1/categories')
