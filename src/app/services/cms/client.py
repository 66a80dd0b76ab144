"""Headless CMS (Strapi) HTTP client.

This module provides an async HTTP client for the CMS REST API: entry
reads and writes for recipes and categories, media uploads through the
upload plugin, and a minimal read used as a health probe.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx
import orjson

from app.core.config import Settings, get_settings
from app.observability.logging import get_logger
from app.services.cms.exceptions import (
    CmsNotFoundError,
    CmsResponseError,
    CmsTimeoutError,
    CmsUnavailableError,
)
from app.services.cms.schemas import (
    CmsCategory,
    CmsMedia,
    CmsPage,
    CmsPagination,
    CmsRecipe,
)


if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.services.cms.schemas import MediaFile


logger = get_logger(__name__)

RECIPES_PATH = "/api/recipes"
CATEGORIES_PATH = "/api/categories"
UPLOAD_PATH = "/api/upload"


def _list_params(name: str, values: Sequence[Any]) -> dict[str, Any]:
    """Encode a list the way the CMS query parser expects: name[0]=a&name[1]=b."""
    return {f"{name}[{index}]": value for index, value in enumerate(values)}


class CmsClient:
    """HTTP client for the headless CMS.

    Example:
        ```python
        client = CmsClient()
        await client.initialize()

        recipe = await client.create_recipe({"title": "Soup", "slug": "soup"})
        await client.publish_recipe(recipe.document_id or recipe.id)

        await client.shutdown()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Get the CMS base URL."""
        url = self._settings.cms.url
        if not url:
            msg = "CMS URL not configured"
            raise RuntimeError(msg)
        return url.rstrip("/")

    @property
    def recipe_uid(self) -> str:
        """Content-type UID that uploads are attached to."""
        return self._settings.cms.recipe_uid

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        headers = {"Accept": "application/json"}
        if self._settings.CMS_API_TOKEN:
            headers["Authorization"] = f"Bearer {self._settings.CMS_API_TOKEN}"

        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self._settings.cms.timeout),
            headers=headers,
        )
        logger.info("CmsClient initialized", base_url=self.base_url)

    async def shutdown(self) -> None:
        """Release resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("CmsClient shutdown")

    # =========================================================================
    # Categories
    # =========================================================================

    async def find_categories(
        self,
        slugs: Sequence[str] | None = None,
        *,
        limit: int | None = None,
        fields: Sequence[str] | None = None,
    ) -> list[CmsCategory]:
        """Find categories, optionally restricted to the given slugs.

        Args:
            slugs: Only return categories whose slug is in this list.
            limit: Maximum number of categories to return.
            fields: Restrict returned attributes.

        Returns:
            Matching categories. Unknown slugs are simply absent.
        """
        params: dict[str, Any] = {}
        if slugs:
            params.update(_list_params("filters[slug][$in]", slugs))
        if fields:
            params.update(_list_params("fields", fields))
        if limit is not None:
            params["pagination[limit]"] = limit

        body = await self._request("GET", CATEGORIES_PATH, params=params)
        return [CmsCategory.model_validate(item) for item in body.get("data") or []]

    async def link_category(self, category_id: int | str, recipe_ref: int | str) -> None:
        """Point a category's ``recipe`` relation at a recipe.

        The relation is owned by the category, so the category is updated.
        """
        await self._request(
            "PUT",
            f"{CATEGORIES_PATH}/{category_id}",
            json_body={"data": {"recipe": recipe_ref}},
        )
        logger.debug("Category linked", category_id=category_id, recipe=recipe_ref)

    async def probe(self) -> list[CmsCategory]:
        """Minimal read proving the CMS and its database answer."""
        return await self.find_categories(limit=1, fields=["id"])

    # =========================================================================
    # Recipes
    # =========================================================================

    async def create_recipe(self, data: dict[str, Any]) -> CmsRecipe:
        """Create a recipe entry.

        Args:
            data: Entry attributes, already in the CMS's camelCase naming.

        Returns:
            The created recipe, carrying both numeric and document ids.
        """
        body = await self._request("POST", RECIPES_PATH, json_body={"data": data})
        recipe = CmsRecipe.model_validate(body.get("data"))
        logger.info(
            "Recipe created in CMS",
            recipe_id=recipe.id,
            document_id=recipe.document_id,
            slug=recipe.slug,
        )
        return recipe

    async def update_recipe(
        self,
        recipe_ref: int | str,
        data: dict[str, Any],
    ) -> CmsRecipe:
        """Update a recipe entry by document id (or numeric id)."""
        body = await self._request(
            "PUT",
            f"{RECIPES_PATH}/{recipe_ref}",
            json_body={"data": data},
        )
        return CmsRecipe.model_validate(body.get("data"))

    async def publish_recipe(
        self,
        recipe_ref: int | str,
        published_at: datetime | None = None,
    ) -> CmsRecipe:
        """Make a recipe visible by setting ``publishedAt``."""
        published_at = published_at or datetime.now(UTC)
        recipe = await self.update_recipe(recipe_ref, {"publishedAt": published_at})
        logger.info("Recipe published", recipe=recipe_ref)
        return recipe

    async def list_recipes(
        self,
        page: int = 1,
        page_size: int | None = None,
    ) -> CmsPage[CmsRecipe]:
        """List published recipes, newest first."""
        params = {
            "populate": "*",
            "sort": "createdAt:desc",
            "pagination[page]": page,
            "pagination[pageSize]": page_size or self._settings.cms.default_page_size,
        }
        body = await self._request("GET", RECIPES_PATH, params=params)
        items = [CmsRecipe.model_validate(item) for item in body.get("data") or []]
        pagination = CmsPagination.model_validate(
            (body.get("meta") or {}).get("pagination") or {}
        )
        return CmsPage(items=items, pagination=pagination)

    async def get_recipe_by_slug(self, slug: str) -> CmsRecipe:
        """Fetch one recipe by slug.

        Raises:
            CmsNotFoundError: If no recipe has this slug.
        """
        params = {"filters[slug][$eq]": slug, "populate": "*"}
        body = await self._request("GET", RECIPES_PATH, params=params)
        data = body.get("data") or []
        if not data:
            msg = f"Recipe '{slug}' not found"
            raise CmsNotFoundError(msg)
        return CmsRecipe.model_validate(data[0])

    async def search_recipes(self, query: str) -> list[CmsRecipe]:
        """Case-insensitive search over title, description and tags."""
        params: dict[str, Any] = {"populate": "*", "sort": "createdAt:desc"}
        for index, field in enumerate(("title", "description", "tags")):
            params[f"filters[$or][{index}][{field}][$containsi]"] = query
        body = await self._request("GET", RECIPES_PATH, params=params)
        return [CmsRecipe.model_validate(item) for item in body.get("data") or []]

    # =========================================================================
    # Media
    # =========================================================================

    async def upload_media(
        self,
        ref_id: int,
        field: str,
        files: Sequence[MediaFile],
    ) -> list[CmsMedia]:
        """Upload files and attach them to a recipe's media field.

        Args:
            ref_id: Numeric recipe id (uploads are keyed by id, not document id).
            field: Media field on the recipe, e.g. ``coverImage``.
            files: Files to upload.

        Returns:
            The created media entries.
        """
        form = {"ref": self.recipe_uid, "refId": str(ref_id), "field": field}
        multipart = [
            ("files", (media.filename, media.content, media.content_type))
            for media in files
        ]
        body = await self._request("POST", UPLOAD_PATH, form=form, files=multipart)
        uploaded = body if isinstance(body, list) else body.get("data") or []
        logger.info(
            "Media uploaded",
            recipe_id=ref_id,
            field=field,
            count=len(uploaded),
        )
        return [CmsMedia.model_validate(item) for item in uploaded]

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        form: dict[str, str] | None = None,
        files: list[tuple[str, tuple[str, bytes, str]]] | None = None,
    ) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            CmsUnavailableError: If the CMS is unreachable.
            CmsTimeoutError: If the request times out.
            CmsNotFoundError: For 404 responses.
            CmsResponseError: For other HTTP errors.
        """
        if not self._http_client:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        kwargs: dict[str, Any] = {"params": params}
        if json_body is not None:
            kwargs["content"] = orjson.dumps(json_body)
            kwargs["headers"] = {"Content-Type": "application/json"}
        if form is not None or files is not None:
            kwargs["data"] = form
            kwargs["files"] = files

        try:
            response = await self._http_client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("Request to CMS timed out", method=method, path=path)
            raise CmsTimeoutError(str(e)) from e
        except httpx.RequestError as e:
            logger.warning("Failed to connect to CMS", path=path, error=str(e))
            msg = f"Failed to connect to CMS: {e}"
            raise CmsUnavailableError(msg) from e

        if response.is_success:
            if not response.content:
                return {}
            return orjson.loads(response.content)

        self._raise_for_error(response)
        return None  # pragma: no cover

    def _raise_for_error(self, response: httpx.Response) -> None:
        """Translate an error response into a CMS exception."""
        status_code = response.status_code

        try:
            error = orjson.loads(response.content).get("error") or {}
            message = error.get("message") or f"HTTP {status_code}"
            details = error.get("details")
        except (orjson.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {status_code}"
            details = None

        logger.warning(
            "CMS returned error",
            status_code=status_code,
            message=message,
            path=response.request.url.path,
        )

        if status_code == 404:
            raise CmsNotFoundError(message)
        raise CmsResponseError(status_code, message, details)
