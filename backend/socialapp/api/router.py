"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from socialapp.api.routes import auth, posts, profile, users

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(posts.router)
api_router.include_router(users.router)
api_router.include_router(profile.router)
