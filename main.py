from fastapi import FastAPI
from config import (
    API_TITLE,
    API_VERSION,
    APPOINTMENTS_PREFIX,
    HOST,
    LOG_LEVEL,
    PORT,
    STAFF_PREFIX,
    USERS_PREFIX,
)
from logging_config import setup_logging
from routers import appointments_router, staff_router, users_router
from store import AppointmentStore, StaffStore, UserStore


def create_app() -> FastAPI:
    """Build the application with a fresh, empty set of stores"""
    setup_logging(LOG_LEVEL)

    app = FastAPI(title=API_TITLE, version=API_VERSION)

    # Stores live as long as the app; handlers reach them through dependencies
    app.state.user_store = UserStore()
    app.state.staff_store = StaffStore()
    app.state.appointment_store = AppointmentStore()

    # Include routers
    app.include_router(users_router.router, prefix=USERS_PREFIX)
    app.include_router(staff_router.router, prefix=STAFF_PREFIX)
    app.include_router(appointments_router.router, prefix=APPOINTMENTS_PREFIX)

    # Root endpoint
    @app.get("/")
    def root():
        return {
            "message": "Hospital Records API",
            "docs": "/docs",
            "endpoints": {
                "create_user": f"POST {USERS_PREFIX}/users",
                "update_user": f"PUT {USERS_PREFIX}/users/{{id}}",
                "list_users": f"GET {USERS_PREFIX}/users",
                "create_staff_user": f"POST {STAFF_PREFIX}/users",
                "update_role": f"PUT {STAFF_PREFIX}/users/{{id}}/role",
                "assign_permissions": f"PUT {STAFF_PREFIX}/users/{{id}}/permissions",
                "view_staff_user": f"GET {STAFF_PREFIX}/users/{{id}}",
                "create_appointment": f"POST {APPOINTMENTS_PREFIX}/appointments",
                "view_appointment": f"GET {APPOINTMENTS_PREFIX}/appointments/{{id}}",
                "delete_appointment": f"DELETE {APPOINTMENTS_PREFIX}/appointments/{{id}}",
            },
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
