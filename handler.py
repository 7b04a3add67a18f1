"""
AWS Lambda handler — Mangum wrapper for FastAPI.
"""

from mangum import Mangum

from ai_detector.main import app

handler = Mangum(app, lifespan="off")
