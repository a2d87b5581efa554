"""
FastAPI integration example for WorkOS AuthKit.

This example shows how to sign users in with AuthKit and protect routes with
the sealed session cookie.
"""

try:
    from fastapi import Depends, FastAPI, Request
    from fastapi.responses import RedirectResponse
    FASTAPI_AVAILABLE = True
except ImportError:
    FASTAPI_AVAILABLE = False

from workos_sdk import WorkOSClient
from workos_sdk.integrations.fastapi import WorkOSFastAPI, WorkOSSessionMiddleware
from workos_sdk.models import AuthenticateWithSessionCookieResponse, SessionOptions

if not FASTAPI_AVAILABLE:
    print("FastAPI is not installed. Install it with: pip install fastapi uvicorn")
    exit(1)

# Reads WORKOS_API_KEY, WORKOS_CLIENT_ID and WORKOS_COOKIE_PASSWORD from the environment
client = WorkOSClient()

# Initialize the FastAPI integration
auth = WorkOSFastAPI(client)

# Create FastAPI app
app = FastAPI(
    title="WorkOS FastAPI Demo",
    description="Demonstrating WorkOS AuthKit sessions with FastAPI",
    version="1.0.0"
)
app.add_middleware(WorkOSSessionMiddleware)

REDIRECT_URI = "http://localhost:8000/callback"


@app.get("/")
async def root(request: Request):
    """Public endpoint - counts visits in the app session."""
    request.state.session["visits"] = request.state.session.get("visits", 0) + 1
    return {"message": "Welcome to the WorkOS FastAPI Demo!", **request.state.session}


@app.get("/login")
async def login():
    """Send the user to AuthKit."""
    return RedirectResponse(
        client.user_management.get_authorization_url(REDIRECT_URI, provider="authkit")
    )


@app.get("/callback")
async def callback(code: str):
    """Exchange the code and store the sealed session."""
    result = await client.user_management.authenticate_with_code(
        code,
        session=SessionOptions(
            seal_session=True, cookie_password=str(auth.cookie_password)
        ),
    )
    response = RedirectResponse("/protected")
    auth.set_session_cookie(response, result.sealed_session or "")
    return response


@app.get("/protected")
async def protected_endpoint(
    session: AuthenticateWithSessionCookieResponse = Depends(auth.require_session()),
):
    """Protected endpoint - authentication required."""
    return {
        "message": "You are authenticated!",
        "user": {
            "id": session.user.id if session.user else None,
            "email": session.user.email if session.user else None,
            "organization_id": session.organization_id,
            "role": session.role,
        }
    }


@app.get("/admin-only")
async def admin_only_endpoint(
    session: AuthenticateWithSessionCookieResponse = Depends(auth.require_role("admin")),
):
    """Admin-only endpoint - requires admin role."""
    return {"message": "Welcome, admin!", "organization_id": session.organization_id}


@app.get("/reports")
async def reports_endpoint(
    session: AuthenticateWithSessionCookieResponse = Depends(
        auth.require_permission("reports:read")
    ),
):
    """Endpoint requiring specific permission."""
    return {"message": "You can read reports!", "permissions": session.permissions}


@app.get("/logout")
async def logout(request: Request):
    """End the WorkOS session and clear the cookie."""
    session = client.user_management.load_sealed_session(
        request.cookies.get(auth.cookie.name, ""), auth.cookie_password
    )
    response = RedirectResponse(await session.get_logout_url())
    auth.clear_session_cookie(response)
    return response


@app.on_event("shutdown")
async def shutdown_event():
    """Clean up on shutdown."""
    await client.close()


if __name__ == "__main__":
    import uvicorn

    print("=== WorkOS FastAPI Integration Demo ===")
    print()
    print("Starting server on http://localhost:8000")
    print("Sign in at http://localhost:8000/login")
    print()

    uvicorn.run(app, host="0.0.0.0", port=8000)
