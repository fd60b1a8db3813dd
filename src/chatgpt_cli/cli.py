"""Command-line entry point.

    chatgpt-cli Explain the difference between TCP and UDP

The arguments are taken verbatim (no options are recognised) and joined with
single spaces to form the prompt. The reply is printed to stdout; any failure
prints a message to stderr and exits with status 1.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from chatgpt_cli import config
from chatgpt_cli import logger as logger_mod

from .client import ChatCompletionClient
from .env import ConfigProvider, EnvConfigProvider
from .errors import ChatCLIError, ConfigError

log = logger_mod.get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1


def _as_text(token: str) -> str:
    # Undecodable argv bytes arrive as surrogate escapes; turn them into U+FFFD.
    try:
        raw = token.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        # Not argv-originated; left for the request encoder to reject.
        return token
    return raw.decode("utf-8", errors="replace")


def join_prompt(tokens: Sequence[str]) -> str:
    return " ".join(_as_text(t) for t in tokens)


def _require_api_key(provider: ConfigProvider) -> str:
    api_key = provider.get_value(config.API_KEY_ENV)
    if not api_key:
        raise ConfigError(f"{config.API_KEY_ENV} is not set")
    return api_key


def run(
    argv: Sequence[str],
    *,
    config_provider: ConfigProvider,
    client: Optional[ChatCompletionClient] = None,
) -> str:
    """Resolve key and prompt, perform the exchange and return the reply."""

    api_key = _require_api_key(config_provider)

    if not argv:
        raise ConfigError(f"usage: {config.PROG_NAME} <prompt>")
    prompt = join_prompt(argv)

    client = client or ChatCompletionClient()
    return client.complete(api_key, prompt)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    config_provider: Optional[ConfigProvider] = None,
    client: Optional[ChatCompletionClient] = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        reply = run(
            argv,
            config_provider=config_provider or EnvConfigProvider(),
            client=client,
        )
    except ChatCLIError as e:
        log.debug(f"{type(e).__name__}: {e}")
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE

    print(reply)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
