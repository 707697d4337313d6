API_VERSION_HEADER = "X-VolunteerHub-Version"

# JWT Configuration
JWT_ALGORITHM = "HS256"

# Volunteer profile limits
DESCRIPTION_MAX_LENGTH = 300
SKILL_MAX_LENGTH = 128
CV_MAX_LENGTH = 512

# Profile fields backed by optional tables, keyed by the field name reported to clients
OPTIONAL_PROFILE_TABLES = {
    "cv": "volunteer_cv",
}

SHOULD_SEND_ORGANIZATION_REQUEST_EMAIL = True

# Paths that never carry a volunteer token
SKIP_AUTH_PATHS = {
    "/openapi.json",
    "/docs",
    "/redoc",
    "/health",
    "/health/liveness",
    "/organization/request",
}
