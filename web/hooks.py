import os
from typing import Any, Optional

from attrs import asdict
from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.event_handler.middlewares import NextMiddleware
from aws_lambda_powertools.utilities.typing import LambdaContext

from web.models import Locals, User

logger: Logger = Logger(
    service="pomi-tracker-web", level=os.getenv("LOG_LEVEL", "INFO").upper()
)
tracer: Tracer = Tracer(service="pomi-tracker-web")

cookie_name = os.getenv("PUBLIC_COOKIENAME")
debug = os.getenv("PUBLIC_DEBUG", "false").lower() == "true"

app = APIGatewayHttpResolver()


def get_session_cookie(
    cookies: Optional[list[str]], name: Optional[str]
) -> Optional[str]:
    """Return the value of cookie ``name`` from HTTP API v2 ``name=value`` entries.

    Events without a ``cookies`` key surface as ``None`` on some Powertools releases.
    """
    if not cookies or not name:
        return None
    for cookie in cookies:
        key, _, value = cookie.partition("=")
        if key.strip() == name:
            return value.strip()
    return None


def resolve_user(cookie: str) -> Optional[User]:
    # TODO: look the session up once the session store exists; until then a
    # present cookie resolves to no user, same as a missing one.
    return None


def session_hook(app: APIGatewayHttpResolver, next_middleware: NextMiddleware) -> Response:
    """Runs before every route and publishes ``Locals`` on the resolver context."""
    cookie = get_session_cookie(app.current_event.cookies, cookie_name)
    logger.debug(
        "Session cookie lookup", cookie_name=cookie_name, present=cookie is not None
    )

    request_locals = Locals(debug=debug)
    if cookie:
        request_locals = Locals(debug=debug, user=resolve_user(cookie))

    app.append_context(locals=request_locals)
    return next_middleware(app)


app.use(middlewares=[session_hook])


@app.get("/")
def current_locals() -> dict[str, Any]:
    return asdict(app.context["locals"])


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    return app.resolve(event, context)
