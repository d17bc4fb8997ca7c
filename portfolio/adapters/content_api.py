# portfolio/adapters/content_api.py
import httpx
import structlog
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote
from pydantic import ValidationError

from portfolio.core.domain.models import (
    AboutSection,
    BlogPost,
    Certification,
    Comment,
    CommentSubmission,
    ContactMessage,
    ContentRecord,
    DashboardSummary,
    Education,
    Experience,
    FetchStatus,
    Profile,
    Project,
    ProjectDetail,
    ProjectFetchResult,
    ProjectStatus,
    Skill,
    SubmissionResult,
    TechItem,
)
from portfolio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

R = TypeVar("R", bound=ContentRecord)

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


class ContentFetchError(Exception):
    """A read against the content API failed; `status` says how."""
    def __init__(self, status: FetchStatus, reason: str):
        self.status = status
        self.reason = reason
        super().__init__(f"{status.value}: {reason}")


class ContentApiClient:
    """
    Driven Adapter: reads portfolio content from the `/api/v1` JSON API.

    Responses are wrapped in an envelope `{"data": ...}`. Every public read
    swallows failures into an empty value and logs a warning; nothing here
    retries. A fresh AsyncClient is opened per call so page renders share no
    connection state.

    Collections are parsed item by item: a field with an unexpected type
    only drops out of that record's typed view, and an entry that is not
    an object is skipped. Each record keeps its payload verbatim.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        revalidate_seconds: int = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_root = f"{self.base_url}/api/v1"
        self.revalidate_seconds = revalidate_seconds
        # Only set by tests (httpx.MockTransport)
        self._transport = transport
        # Freshness hint for caches between us and the API
        self.headers = {
            "Accept": "application/json",
            "Cache-Control": f"max-age={revalidate_seconds}",
        }

    # --- Projects ---

    async def fetch_published_projects(self, limit: Optional[int] = None) -> List[Project]:
        """
        Published projects from `GET /api/v1/projects?status=published`.
        Never raises: bad status, transport errors and bad JSON all give [].
        """
        result = await self.fetch_published_projects_result(limit=limit)
        return result.projects

    async def fetch_published_projects_result(self, limit: Optional[int] = None) -> ProjectFetchResult:
        params = self._published(limit)

        try:
            data = await self._get_data("/projects", params=params)
            projects = self._parse_list(Project, self._member(data, "projects"))
        except ContentFetchError as e:
            logger.warning("projects_fetch_failed", status=e.status.value, reason=e.reason)
            return ProjectFetchResult(status=e.status, reason=e.reason)

        logger.debug("projects_fetched", count=len(projects))
        return ProjectFetchResult(projects=projects)

    async def fetch_project(self, slug: str) -> Optional[ProjectDetail]:
        try:
            data = await self._get_data(f"/projects/{self._segment(slug)}")
            return self._parse_one(ProjectDetail, data)
        except ContentFetchError as e:
            logger.warning("project_fetch_failed", slug=slug, status=e.status.value, reason=e.reason)
            return None

    # --- Insights ---

    async def fetch_blog_posts(self, limit: Optional[int] = None) -> List[BlogPost]:
        return await self._read_list("blog_posts", "/blog", "posts", BlogPost, params=self._published(limit))

    async def fetch_blog_post(self, slug: str) -> Optional[BlogPost]:
        return await self._read_one("blog_post", f"/blog/{self._segment(slug)}", None, BlogPost)

    async def fetch_comments(self, slug: str) -> List[Comment]:
        """Threaded comments (each with nested `replies`) for one post."""
        return await self._read_list("comments", f"/blog/{self._segment(slug)}/comments", "comments", Comment)

    async def submit_comment(self, slug: str, comment: CommentSubmission) -> SubmissionResult:
        return await self._post(
            "comment",
            f"/blog/{self._segment(slug)}/comments",
            comment.model_dump(exclude_none=True),
            failure="Failed to post comment",
        )

    # --- Site content ---

    async def fetch_profile(self) -> Optional[Profile]:
        return await self._read_one("profile", "/profile", None, Profile)

    async def fetch_tech_stack(self) -> List[TechItem]:
        return await self._read_list("tech_stack", "/tech-stack", "techStack", TechItem)

    async def fetch_skills(self) -> List[Skill]:
        return await self._read_list("skills", "/skills", None, Skill)

    async def fetch_about_sections(self) -> Dict[str, AboutSection]:
        """About page blocks keyed by `section_key` (`data.sections`)."""
        try:
            data = await self._get_data("/about")
            sections = self._member(data, "sections")
            if not sections:
                return {}
            if not isinstance(sections, dict):
                raise ContentFetchError(FetchStatus.MALFORMED, "about sections is not an object")
            parsed = {}
            for key, value in sections.items():
                section = self._parse_item(AboutSection, value)
                if section is not None:
                    parsed[key] = section
            return parsed
        except ContentFetchError as e:
            logger.warning("content_fetch_failed", resource="about", status=e.status.value, reason=e.reason)
            return {}

    async def fetch_experiences(self) -> List[Experience]:
        return await self._read_list("experiences", "/experiences", "experiences", Experience)

    async def fetch_education(self) -> List[Education]:
        return await self._read_list("education", "/education", "education", Education)

    async def fetch_certifications(self) -> List[Certification]:
        return await self._read_list("certifications", "/certifications", "certifications", Certification)

    async def submit_contact(self, message: ContactMessage) -> SubmissionResult:
        return await self._post(
            "contact",
            "/contact",
            message.model_dump(exclude_none=True),
            failure="Failed to send message",
        )

    # --- Admin ---

    async def fetch_dashboard(self) -> Optional[DashboardSummary]:
        return await self._read_one("dashboard", "/dashboard", None, DashboardSummary)

    async def health_check(self) -> bool:
        """True when the API host answers with anything below 500."""
        try:
            async with self._client() as client:
                response = await client.get(f"{self.api_root}/projects", params={"status": "published", "limit": 1})
            return response.status_code < 500
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("content_api_unreachable", base_url=self.base_url, error=str(e))
            return False

    # --- Internals ---

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(headers=self.headers, transport=self._transport)

    @staticmethod
    def _published(limit: Optional[int]) -> Dict[str, Any]:
        params: Dict[str, Any] = {"status": ProjectStatus.PUBLISHED.value}
        if limit is not None:
            params["limit"] = limit
        return params

    @staticmethod
    def _segment(value: str) -> str:
        """`value` as a single path segment (`/`, `?` and `#` escaped)."""
        return quote(value, safe="")

    async def _read_list(
        self,
        name: str,
        path: str,
        member: Optional[str],
        model: Type[R],
        params: Optional[Dict[str, Any]] = None,
    ) -> List[R]:
        try:
            data = await self._get_data(path, params=params)
            if member is not None:
                data = self._member(data, member)
            return self._parse_list(model, data)
        except ContentFetchError as e:
            logger.warning("content_fetch_failed", resource=name, status=e.status.value, reason=e.reason)
            return []

    async def _read_one(self, name: str, path: str, member: Optional[str], model: Type[R]) -> Optional[R]:
        try:
            data = await self._get_data(path)
            if member is not None:
                data = self._member(data, member)
            return self._parse_one(model, data)
        except ContentFetchError as e:
            logger.warning("content_fetch_failed", resource=name, status=e.status.value, reason=e.reason)
            return None

    async def _get_data(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GETs `path` under the API root and returns the envelope's `data`
        member (None when the body has none).

        Raises:
            ContentFetchError: on transport failure, non-2xx status or a body
            that is not JSON.
        """
        url = f"{self.api_root}{path}"
        with tracer.start_as_current_span("content_api.get") as span:
            span.set_attribute("http.url", url)
            try:
                async with self._client() as client:
                    response = await client.get(url, params=params)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise ContentFetchError(FetchStatus.UNREACHABLE, f"{type(e).__name__}: {e}") from e

            span.set_attribute("http.status_code", response.status_code)
            if not response.is_success:
                raise ContentFetchError(FetchStatus.HTTP_ERROR, f"HTTP {response.status_code} from {path}")

            try:
                body = response.json()
            except ValueError as e:
                raise ContentFetchError(FetchStatus.MALFORMED, f"invalid JSON from {path}") from e

        if not isinstance(body, dict):
            return None
        return body.get("data")

    async def _post(self, name: str, path: str, payload: Dict[str, Any], failure: str) -> SubmissionResult:
        """
        POSTs a JSON body once. The API's `error` message is passed back
        for the visitor; nothing is raised.
        """
        url = f"{self.api_root}{path}"
        with tracer.start_as_current_span("content_api.post") as span:
            span.set_attribute("http.url", url)
            try:
                async with self._client() as client:
                    response = await client.post(url, json=payload)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning("content_submit_failed", resource=name, status=FetchStatus.UNREACHABLE.value, reason=str(e))
                return SubmissionResult(ok=False, message=NETWORK_ERROR_MESSAGE)

            span.set_attribute("http.status_code", response.status_code)
            try:
                body = response.json()
            except ValueError:
                body = None
            body = body if isinstance(body, dict) else {}

        if not response.is_success:
            error = body.get("error")
            logger.warning("content_submit_failed", resource=name, status=FetchStatus.HTTP_ERROR.value, code=response.status_code, reason=error)
            return SubmissionResult(ok=False, message=error if isinstance(error, str) and error else failure)

        data = body.get("data")
        confirmation = data.get("message") if isinstance(data, dict) else None
        logger.info("content_submitted", resource=name)
        return SubmissionResult(ok=True, message=confirmation if isinstance(confirmation, str) else None)

    @staticmethod
    def _member(data: Any, key: str) -> Any:
        if not isinstance(data, dict):
            return None
        return data.get(key)

    @staticmethod
    def _parse_item(model: Type[R], value: Any) -> Optional[R]:
        """One record, or None when `value` cannot be read as `model`."""
        if not isinstance(value, dict):
            logger.warning("content_item_skipped", model=model.__name__, reason=f"{type(value).__name__} entry")
            return None
        try:
            return model.model_validate(value)
        except ValidationError as e:
            logger.warning("content_item_skipped", model=model.__name__, reason=f"{e.error_count()} errors")
            return None

    @classmethod
    def _parse_list(cls, model: Type[R], value: Any) -> List[R]:
        # Absent or empty members collapse to [].
        if not value:
            return []
        if not isinstance(value, list):
            raise ContentFetchError(FetchStatus.MALFORMED, f"expected a list of {model.__name__}")
        records = (cls._parse_item(model, item) for item in value)
        return [r for r in records if r is not None]

    @staticmethod
    def _parse_one(model: Type[R], value: Any) -> Optional[R]:
        if not value:
            return None
        if not isinstance(value, dict):
            raise ContentFetchError(FetchStatus.MALFORMED, f"expected a {model.__name__} object")
        try:
            return model.model_validate(value)
        except ValidationError as e:
            raise ContentFetchError(FetchStatus.MALFORMED, f"unexpected payload shape ({e.error_count()} errors)") from e
