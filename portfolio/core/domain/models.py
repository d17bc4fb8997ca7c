# portfolio\core\domain\models.py
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Union
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

# --- Enums ---

class ProjectStatus(str, Enum):
    """Lifecycle label of a project record in the content API."""
    DRAFT = "draft"
    PUBLISHED = "published"   # Only subset exposed on public pages
    ARCHIVED = "archived"

class FetchStatus(str, Enum):
    """Outcome of a read against the content API."""
    OK = "ok"
    HTTP_ERROR = "http_error"     # Non-2xx response
    UNREACHABLE = "unreachable"   # Transport failure (DNS, refused, timeout)
    MALFORMED = "malformed"       # Body is not JSON or has the wrong shape

# --- Entities ---

class ContentRecord(BaseModel):
    """
    Base for records sourced from the content API.

    The typed attributes are a convenience view for the templates. A field
    whose value does not fit its declared type is left out of that view
    instead of failing the whole record, and the payload as received is
    kept verbatim for `to_payload()`.
    """
    model_config = ConfigDict(extra="allow")

    _payload: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _tolerate_bad_fields(cls, data: Any, handler):
        if not isinstance(data, dict):
            return handler(data)

        view = dict(data)
        while True:
            try:
                record = handler(view)
                break
            except ValidationError as e:
                bad = cls._offending_keys(e, view)
                # Missing required fields cannot be fixed by dropping keys
                if not bad:
                    raise
                for key in bad:
                    view.pop(key)

        record._payload = dict(data)
        return record

    @classmethod
    def _offending_keys(cls, error: ValidationError, data: Dict[str, Any]) -> Set[str]:
        aliases = {f.alias: name for name, f in cls.model_fields.items() if f.alias}
        keys = set()
        for err in error.errors():
            if not err["loc"]:
                continue
            head = err["loc"][0]
            for key in (head, aliases.get(head)):
                if key in data:
                    keys.add(key)
        return keys

    def to_payload(self) -> Dict[str, Any]:
        """The record exactly as the API sent it."""
        if self._payload is not None:
            return dict(self._payload)
        return self.model_dump(exclude_unset=True)

class Project(ContentRecord):
    """
    A published portfolio project, as listed on /projects.
    """
    id: Optional[Union[str, int]] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[str] = None

    short_description: Optional[str] = None
    category: Optional[str] = None
    icon: Optional[str] = None
    icon_color: Optional[str] = None
    thumbnail_url: Optional[str] = None
    year: Optional[Union[str, int]] = None
    tech_stack: Optional[List[str]] = None

class Deliverable(ContentRecord):
    icon: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None

class Outcome(ContentRecord):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: Optional[str] = None
    label: Optional[str] = None

class ProjectDetail(Project):
    """
    A single project with its case-study sections (problem, solution,
    deliverables and measured outcomes).
    """
    description: Optional[str] = None
    problem: Optional[str] = None
    solution: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    deliverables: List[Deliverable] = Field(default_factory=list)
    outcomes: List[Outcome] = Field(default_factory=list)

    @field_validator("tags", "deliverables", "outcomes", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

class Profile(ContentRecord):
    """
    Owner profile shown in the home page hero card.
    Defaults are the placeholder profile used until one is configured.
    """
    name: str = "Your Name"
    role: str = "Your Role"
    status: str = "Available for hire"
    tagline: str = "Welcome to my portfolio"
    bio: str = "Add your bio in the admin settings."
    short_bio: Optional[str] = None
    avatar: str = "/placeholder-avatar.png"
    email: str = "email@example.com"
    location: str = "Your Location"
    linkedin_url: str = "#"
    github_url: str = "#"

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Null or empty fields fall back to the placeholder values.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v not in (None, "")}
        return data

class BlogPost(ContentRecord):
    """
    A published insight. `category` arrives either as a plain label or as
    the joined category row (`{"name": ..., "slug": ...}`).
    """
    id: Optional[Union[str, int]] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[Union[str, Dict[str, Any]]] = None
    read_time: Optional[Union[str, int]] = None
    published_at: Optional[str] = None
    cover_image: Optional[str] = None
    author: Optional[str] = None

    @property
    def category_name(self) -> Optional[str]:
        if isinstance(self.category, dict):
            return self.category.get("name")
        return self.category or None

    @property
    def paragraphs(self) -> List[str]:
        """Body split into blank-line separated paragraphs."""
        if not self.content:
            return []
        return [p.strip() for p in self.content.split("\n\n") if p.strip()]

class Comment(ContentRecord):
    """A reader comment; `replies` nests answers to it."""
    id: Optional[Union[str, int]] = None
    author_name: Optional[str] = None
    author_initials: Optional[str] = None
    author_initials_color: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[str] = None
    likes_count: int = 0
    depth: int = 0
    parent_comment_id: Optional[Union[str, int]] = None
    replies: List["Comment"] = Field(default_factory=list)

    @field_validator("replies", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def initials(self) -> str:
        if self.author_initials:
            return self.author_initials
        words = (self.author_name or "").split()
        return "".join(w[0] for w in words).upper()[:2] or "??"

class TechItem(ContentRecord):
    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None

class Skill(ContentRecord):
    title: Optional[str] = None
    desc: Optional[str] = None
    icon: Optional[str] = None

class AboutSection(ContentRecord):
    """
    One keyed block of the about page (`header`, `story`, `funFact`,
    `offline`). The story stores its paragraphs as a JSON-encoded list.
    """
    section_key: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[Any] = None
    story_tag: Optional[str] = None
    story_year: Optional[Union[str, int]] = None
    image_url: Optional[str] = None

    @property
    def paragraphs(self) -> List[str]:
        value = self.content
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return [value] if value else []
        if isinstance(value, list):
            return [str(p) for p in value if p]
        return [str(value)] if value else []

class Experience(ContentRecord):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    description: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    color: Optional[str] = None

    @field_validator("highlights", "tags", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def period(self) -> str:
        end = "Present" if self.is_current else (self.end_date or "")
        return " - ".join(part for part in (self.start_date or "", end) if part)

class Education(ContentRecord):
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    school: Optional[str] = None
    location: Optional[str] = None
    start_year: Optional[Union[int, str]] = None
    end_year: Optional[Union[int, str]] = None
    description: Optional[str] = None

class Certification(ContentRecord):
    name: Optional[str] = None
    short_name: Optional[str] = None
    subtitle: Optional[str] = None
    issuer: Optional[str] = None
    issue_date: Optional[str] = None
    credential_url: Optional[str] = None
    icon: Optional[str] = None

class Stat(BaseModel):
    value: str
    label: str
    icon: str
    color: str

class DashboardStat(ContentRecord):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    label: str
    value: str
    change: str = ""
    icon: str = "insights"
    color: str = "gray"

class DashboardSummary(ContentRecord):
    """
    Content counts shown on the admin dashboard.
    """
    stats: List[DashboardStat] = Field(default_factory=list)
    projects_count: int = Field(0, alias="projectsCount")
    blogs_count: int = Field(0, alias="blogsCount")
    experiences_count: int = Field(0, alias="experiencesCount")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def default(cls) -> "DashboardSummary":
        """Zeroed summary rendered when the dashboard API cannot be read."""
        return cls(stats=[
            DashboardStat(label="Total Projects", value="0", change="Total", icon="folder_open", color="blue"),
            DashboardStat(label="Blog Posts", value="0", change="Total", icon="article", color="purple"),
            DashboardStat(label="Total Views", value="0", change="This month", icon="visibility", color="green"),
            DashboardStat(label="Tech Stack", value="0", change="Tools", icon="code", color="orange"),
        ])

# --- Outbound Submissions ---

class ContactMessage(BaseModel):
    """Visitor inquiry forwarded to `POST /api/v1/contact`."""
    name: str
    email: str
    message: str
    subject: Optional[str] = None
    company: Optional[str] = None

class CommentSubmission(BaseModel):
    """New comment forwarded to `POST /api/v1/blog/{slug}/comments`."""
    author_name: str
    content: str
    author_email: Optional[str] = None
    parent_comment_id: Optional[str] = None

class SubmissionResult(BaseModel):
    """
    Outcome of a write through the content API.
    `message` is the API's confirmation or the error to show the visitor.
    """
    ok: bool
    message: Optional[str] = None

# --- Results & Page Models ---

class ProjectFetchResult(BaseModel):
    """
    Explicit outcome of the published-projects read.

    `projects` is always a list (empty on failure); `status` and `reason`
    tell "nothing published" apart from "API unreachable".
    """
    projects: List[Project] = Field(default_factory=list)
    status: FetchStatus = FetchStatus.OK
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.OK

class ProjectsPage(BaseModel):
    """
    Everything the /projects template needs.
    `categories` is derived from the full list, never from the filtered one.
    """
    projects: List[Project] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    active_category: Optional[str] = None
    visible_projects: List[Project] = Field(default_factory=list)
    revalidate_seconds: int = 60

    @property
    def heading(self) -> str:
        return self.active_category or "All Projects"

class HomePage(BaseModel):
    profile: Profile = Field(default_factory=Profile)
    projects: List[Project] = Field(default_factory=list)
    tech_stack: List[TechItem] = Field(default_factory=list)
    posts: List[BlogPost] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    stats: List[Stat] = Field(default_factory=list)

class InsightsPage(BaseModel):
    """The /insights listing: newest post as the hero, the rest as cards."""
    posts: List[BlogPost] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)

    @property
    def latest(self) -> Optional[BlogPost]:
        return self.posts[0] if self.posts else None

    @property
    def others(self) -> List[BlogPost]:
        return self.posts[1:]

class PostPage(BaseModel):
    post: BlogPost
    comments: List[Comment] = Field(default_factory=list)

    @property
    def comment_count(self) -> int:
        """Comments including every nested reply."""
        def count(items: List[Comment]) -> int:
            return sum(1 + count(c.replies) for c in items)
        return count(self.comments)

class AboutPage(BaseModel):
    sections: Dict[str, AboutSection] = Field(default_factory=dict)
    experiences: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)

    def section(self, key: str) -> AboutSection:
        """The section stored under `key`, or an empty one."""
        return self.sections.get(key) or AboutSection(section_key=key)

    @property
    def is_empty(self) -> bool:
        return not (self.sections or self.experiences or self.education or self.certifications)
