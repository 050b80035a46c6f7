import azure.functions as func

from main import app as fastapi_app

# Azure Functions entry point; every HTTP trigger is routed into the FastAPI app.
app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.FUNCTION)
