import json

import httpx
import openai

from treeqr.description.client_base import BaseChatClient
from treeqr.description.exceptions import GenerationFailedError, GenerationNetworkError


class OpenAIClientAdapter(BaseChatClient):
    """Text generation client built on the OpenAI-compatible chat API.

    Only the model and the messages are sent; sampling parameters are left at
    the service defaults. Retries are disabled so each call is attempted once.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise GenerationFailedError(
                f"AI provider API error: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise GenerationFailedError(
                f"AI provider returned an unparseable response: {exc}"
            ) from exc

        choices = getattr(response, "choices", None)
        if not choices:
            raise GenerationFailedError("no response from AI")
        try:
            content = choices[0].message.content
        except (AttributeError, TypeError, IndexError, KeyError) as exc:
            raise GenerationFailedError("AI returned an unparseable response") from exc
        if content is None:
            raise GenerationFailedError("AI returned empty response")
        if not isinstance(content, str):
            raise GenerationFailedError("AI returned an unparseable response")
        return content
