"""Development entrypoint: `python main.py` serves the VoteHub app with uvicorn."""

import os

from votehub.main import app

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
