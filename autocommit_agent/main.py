from dotenv import load_dotenv


from fastapi import FastAPI

from autocommit_agent.api.api_v1 import router as api_v1
from autocommit_agent.core.config import settings
from autocommit_agent.core.lifespan import lifespan

load_dotenv()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


@app.get("/")
def root():
    return {"message": "Hello from the GitHub autocommit agent!"}


app.include_router(api_v1)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
