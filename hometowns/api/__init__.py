"""Web surface: FastAPI app, routes and the HTML renderer."""
