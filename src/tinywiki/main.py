"""TinyWiki FastAPI application."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from tinywiki.config import Settings
from tinywiki.core.controller import PageController, Redirect, Render
from tinywiki.core.exceptions import StorageError
from tinywiki.core.routing import Operation, require_title
from tinywiki.core.storage import FileStorage

logger = logging.getLogger(__name__)

router = APIRouter()


def get_controller(request: Request) -> PageController:
    return request.app.state.controller


def respond(request: Request, outcome: Render | Redirect):
    """Turn a controller outcome into an HTTP response."""
    if isinstance(outcome, Redirect):
        return RedirectResponse(url=outcome.location, status_code=status.HTTP_302_FOUND)
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        outcome.template,
        {
            "app_title": request.app.state.settings.app_title,
            "page": outcome.page,
            "body_html": outcome.body_html,
        },
    )


def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage error on %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def template_error_handler(request: Request, exc: TemplateError):
    logger.error("Template error on %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/", response_class=HTMLResponse)
async def list_pages(
    request: Request, controller: PageController = Depends(get_controller)
):
    """Home page - list all pages."""
    return respond(request, await controller.list_pages())


@router.api_route("/edit/{title}", methods=["GET", "POST"], response_class=HTMLResponse)
async def edit_page(
    request: Request,
    title: str = Depends(require_title(Operation.EDIT)),
    controller: PageController = Depends(get_controller),
):
    """Edit page form."""
    return respond(request, await controller.edit(title))


@router.post("/save/{title}")
async def save_page(
    request: Request,
    title: str = Depends(require_title(Operation.SAVE)),
    body: str = Form(""),
    controller: PageController = Depends(get_controller),
):
    """Save page body."""
    return respond(request, await controller.save(title, body))


@router.get("/view/{title}", response_class=HTMLResponse)
async def view_page(
    request: Request,
    title: str = Depends(require_title(Operation.VIEW)),
    controller: PageController = Depends(get_controller),
):
    """View a wiki page."""
    return respond(request, await controller.view(title))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around a single settings object."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level)

    # Paths are matched exactly; "/view/Foo/" is not redirected to "/view/Foo"
    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(settings.template_dir))
    app.state.controller = PageController(
        FileStorage(settings.data_dir, suffix=settings.page_suffix)
    )

    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(TemplateError, template_error_handler)

    app.include_router(router)

    logger.info("TinyWiki serving pages from %s", settings.data_dir)
    return app

