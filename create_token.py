from registration_portal_api.app.core.config import settings
from registration_portal_api.app.core.security import create_admin_token
# admin panel session token; lifetime in seconds, e.g. 7 days
token = create_admin_token(settings, expires_in=7*24*60*60)
print(token)
