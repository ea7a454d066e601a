"""Azure Functions host for the FastAPI app.

host.json clears the default "api" route prefix so the app's own
/api/productlist path is served as-is.
"""

import azure.functions as func

from app import app as fastapi_app

app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.ANONYMOUS)
