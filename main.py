# main.py — Talkhis (تلخيص عربي/إنجليزي + مشاعر + مواضيع) عبر HTTP
import os

import uvicorn

from talkhis.app import app

if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
