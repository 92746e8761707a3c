"""Terminal Portfolio - HTTP entry point."""
import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import portfolio
from ai.cooldown import CooldownGate
from ai.llm import get_llm_client
from config import Settings, settings as default_settings
from terminal.interpreter import Interpreter
from terminal.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, llm_factory=None, clock=None) -> FastAPI:
    """Build the app with its own cooldown gate.

    One gate per app: every visitor of this process shares the same cooldowns.
    """
    settings = settings or default_settings

    gate_kwargs = {"clock": clock} if clock else {}
    gate = CooldownGate(
        settings.ai_cooldown_seconds,
        overrides=settings.ai_cooldown_overrides,
        **gate_kwargs,
    )
    if llm_factory is None:
        def llm_factory():
            return get_llm_client(settings)

    app = FastAPI(title="Terminal Portfolio")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.state.gate = gate
    app.state.llm_factory = llm_factory
    app.state.snapshot = portfolio.get_portfolio_snapshot
    app.state.interpreter = Interpreter(gate, llm_factory=llm_factory)
    app.include_router(router)
    return app


def main() -> None:
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=logging.INFO,
        stream=sys.stdout,
    )
    provider = default_settings.llm_provider.lower()
    logger.info("LLM provider: %s", provider)
    logger.info(
        "Serving on %s:%d (AI cooldown %.0fs)",
        default_settings.server_host,
        default_settings.server_port,
        default_settings.ai_cooldown_seconds,
    )
    uvicorn.run(
        create_app(),
        host=default_settings.server_host,
        port=default_settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
