# Configuration settings for the Hospital Records API
import os

from models import Permission, Role

# Role permissions mapping
ROLE_PERMISSIONS = {
    Role.ADMIN: frozenset({
        Permission.VIEW_PATIENT,
        Permission.ADD_PATIENT,
        Permission.EDIT_PATIENT,
        Permission.DELETE_PATIENT,
        Permission.VIEW_DOCTOR,
        Permission.ADD_DOCTOR,
    }),
    Role.DOCTOR: frozenset({
        Permission.VIEW_PATIENT,
        Permission.ADD_PATIENT,
        Permission.EDIT_PATIENT,
        Permission.VIEW_DOCTOR,
    }),
    Role.NURSE: frozenset({
        Permission.VIEW_PATIENT,
    }),
}

# Route prefixes
USERS_PREFIX = "/api"
STAFF_PREFIX = "/api/rbac"
APPOINTMENTS_PREFIX = "/api"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# API Configuration
API_TITLE = "Hospital Records API"
API_VERSION = "1.0.0"
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
