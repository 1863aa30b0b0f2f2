from mangum import Mangum

from todo_api.main import create_app
from todo_api.routers.todo_router import router as todo_router

app = create_app(todo_router, title="Todo Lambda")

handler = Mangum(app)
