from mangum import Mangum

from todo_api.main import create_app
from todo_api.routers.user_router import router as user_router

app = create_app(user_router, title="User Lambda")

handler = Mangum(app)
