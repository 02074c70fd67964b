"""
PostSearch Backend: Posts Route Handlers
==========================================

What:  The five REST bindings of the post resource.
How:   Each handler pulls path/body parameters, calls one PostsController
       method, and returns the resolved value with the success status.
       Failures are raised and mapped to status codes by the handlers in
       main.py (NotFoundError → 404 with empty body).
Who:   Mounted by main.create_app().

Routes:
    GET    /posts       → index    200
    POST   /posts       → create   201
    GET    /posts/{id}  → show     200 / 404
    POST   /posts/{id}  → update   200 / 404
    DELETE /posts/{id}  → destroy  200 {"id": id} / 404
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request

from app.schemas.post import DeletedPost, ErrorResponse, Post, PostEnvelope
from app.services.posts_controller import PostsController

router = APIRouter(prefix="/posts", tags=["Posts"])

# Post bodies are sent as the controller returned them (response_model=None);
# the Post schema only documents them. Extra attributes must not be dropped.

_NOT_FOUND = {404: {"description": "No post with this id (empty body)"}}
_STORE_ERRORS = {
    502: {"description": "Document store rejected the request", "model": ErrorResponse},
    503: {"description": "Document store unreachable", "model": ErrorResponse},
}


def get_posts_controller(request: Request) -> PostsController:
    """
    FastAPI dependency returning the controller bound by create_app().

    Tests override the controller by passing a stub to create_app().
    """
    return request.app.state.posts_controller


@router.get(
    "",
    response_model=None,
    responses={200: {"model": List[Post]}, **_STORE_ERRORS},
    summary="List all posts",
)
async def list_posts(
    controller: PostsController = Depends(get_posts_controller),
) -> List[Dict[str, Any]]:
    return await controller.index()


@router.post(
    "",
    status_code=201,
    response_model=None,
    responses={201: {"model": Post}, **_STORE_ERRORS},
    summary="Create a post",
    description="The store assigns the id; the response echoes the submitted attributes with it.",
)
async def create_post(
    payload: Optional[PostEnvelope] = None,
    controller: PostsController = Depends(get_posts_controller),
) -> Dict[str, Any]:
    attrs = payload.post if payload else {}
    return await controller.create(attrs)


@router.get(
    "/{post_id}",
    response_model=None,
    responses={200: {"model": Post}, **_NOT_FOUND, **_STORE_ERRORS},
    summary="Get a single post by id",
)
async def show_post(
    post_id: str,
    controller: PostsController = Depends(get_posts_controller),
) -> Dict[str, Any]:
    return await controller.show(post_id)


@router.post(
    "/{post_id}",
    response_model=None,
    responses={200: {"model": Post}, **_NOT_FOUND, **_STORE_ERRORS},
    summary="Update a post",
    description=(
        "Partially updates the stored document. The response holds the submitted "
        "attributes and the id; it is not re-read from the store."
    ),
)
async def update_post(
    post_id: str,
    payload: Optional[PostEnvelope] = None,
    controller: PostsController = Depends(get_posts_controller),
) -> Dict[str, Any]:
    attrs = payload.post if payload else {}
    return await controller.update(post_id, attrs)


@router.delete(
    "/{post_id}",
    response_model=DeletedPost,
    responses={**_NOT_FOUND, **_STORE_ERRORS},
    summary="Delete a post",
)
async def destroy_post(
    post_id: str,
    controller: PostsController = Depends(get_posts_controller),
) -> DeletedPost:
    deleted_id = await controller.destroy(post_id)
    return DeletedPost(id=deleted_id)
