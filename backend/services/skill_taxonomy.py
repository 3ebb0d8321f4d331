"""Curated skill tables: synonym groups, importance tiers, learning resources.

All tables are built once at import and exposed read-only
(MappingProxyType / tuple / frozenset), so worker threads can share them
without locking.
"""

import re
from functools import lru_cache
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Synonym groups: canonical skill id -> aliases
# A job skill and a candidate skill resolving to the same canonical id are a
# "semantic" match.
# ---------------------------------------------------------------------------
SYNONYM_GROUPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "javascript": ("js", "ecmascript", "node.js", "nodejs"),
    "typescript": ("ts",),
    "python": ("py", "django", "flask"),
    "react": ("reactjs", "react.js"),
    "vue": ("vuejs", "vue.js"),
    "angular": ("angularjs", "angular.js"),
    "sql": ("database", "mysql", "postgresql", "oracle"),
    "aws": ("amazon web services", "cloud"),
    "docker": ("containerization", "containers"),
    "kubernetes": ("k8s", "orchestration"),
    "go": ("golang",),
    "machine learning": ("ml", "deep learning"),
    "ci/cd": ("cicd", "continuous integration", "continuous delivery"),
})


def _term_pattern(term: str) -> re.Pattern:
    # Boundary match so "java" never hits "javascript" and "py" never hits "happy"
    return re.compile(rf"(?<![a-z0-9.#+]){re.escape(term)}(?![a-z0-9#+])")


_ALIAS_INDEX: MappingProxyType[str, frozenset[str]] = MappingProxyType({
    alias: frozenset(
        canonical for canonical, aliases in SYNONYM_GROUPS.items()
        if alias == canonical or alias in aliases
    )
    for canonical, aliases in SYNONYM_GROUPS.items()
    for alias in (canonical, *aliases)
})

_ALIAS_PATTERNS: tuple[tuple[re.Pattern, frozenset[str]], ...] = tuple(
    (_term_pattern(alias), groups) for alias, groups in _ALIAS_INDEX.items()
)


def contains_term(text: str, term: str) -> bool:
    """True if `term` appears in `text` as a whole token sequence."""
    return _term_pattern(term).search(text) is not None


@lru_cache(maxsize=4096)
def skill_groups(skill: str) -> frozenset[str]:
    """Canonical synonym groups a normalized skill belongs to.

    Exact alias lookup first; otherwise any alias occurring as a token inside
    the skill text (e.g. "aws lambda" -> {"aws"}).
    """
    direct = _ALIAS_INDEX.get(skill)
    if direct is not None:
        return direct
    found: set[str] = set()
    for pattern, groups in _ALIAS_PATTERNS:
        if pattern.search(skill):
            found.update(groups)
    return frozenset(found)


# ---------------------------------------------------------------------------
# Importance tiers for skill gaps
# ---------------------------------------------------------------------------
HIGH_IMPORTANCE_SKILLS: frozenset[str] = frozenset({
    # Core languages
    "javascript", "typescript", "python", "java", "c#", "c++", "go", "sql",
    # Frameworks
    "react", "angular", "vue", "node.js", "spring", "django",
    # Cloud
    "aws", "azure", "gcp",
    # ML
    "machine learning", "deep learning", "tensorflow", "pytorch",
})

MEDIUM_IMPORTANCE_SKILLS: frozenset[str] = frozenset({
    # Tooling
    "docker", "kubernetes", "git", "linux", "terraform", "ansible",
    # CI/CD
    "ci/cd", "jenkins", "github actions", "gitlab ci",
    # Testing frameworks
    "jest", "pytest", "junit", "selenium", "cypress", "mocha",
})

# ---------------------------------------------------------------------------
# Learning resources: first key found in the skill wins, so list more
# specific keys before broader ones.
# ---------------------------------------------------------------------------
LEARNING_RESOURCES: tuple[tuple[str, tuple[str, ...]], ...] = (
    # Languages
    ("javascript", ("MDN Web Docs", "freeCodeCamp", "JavaScript.info")),
    ("typescript", ("TypeScript Handbook", "Total TypeScript", "freeCodeCamp")),
    ("python", ("Python.org", "Real Python", "Codecademy")),
    ("java", ("Oracle Java Tutorials", "Baeldung", "Codecademy")),
    ("go", ("A Tour of Go", "Go by Example", "Effective Go")),
    ("rust", ("The Rust Book", "Rustlings", "Rust by Example")),
    ("c#", ("Microsoft Learn", "C# Yellow Book", "Pluralsight")),
    # Frameworks
    ("react", ("React Docs", "React Tutorial", "Egghead.io")),
    ("angular", ("Angular Docs", "Angular University", "Egghead.io")),
    ("vue", ("Vue.js Guide", "Vue Mastery", "Vue School")),
    ("node", ("Node.js Docs", "The Net Ninja", "freeCodeCamp")),
    ("django", ("Django Docs", "Django Girls Tutorial", "Real Python")),
    ("spring", ("Spring Guides", "Baeldung", "Spring Academy")),
    # Cloud platforms
    ("aws", ("AWS Training", "Cloud Academy", "A Cloud Guru")),
    ("azure", ("Microsoft Learn", "Azure Fundamentals (AZ-900)", "Pluralsight")),
    ("gcp", ("Google Cloud Skills Boost", "Coursera Google Cloud", "A Cloud Guru")),
    ("docker", ("Docker Docs", "TechWorld with Nana", "KodeKloud")),
    ("kubernetes", ("Kubernetes Docs", "KodeKloud", "TechWorld with Nana")),
    ("terraform", ("HashiCorp Learn", "KodeKloud", "A Cloud Guru")),
    # Data / ML
    ("sql", ("SQLBolt", "W3Schools SQL", "Mode Analytics")),
    ("machine learning", ("Coursera Machine Learning", "fast.ai", "Kaggle Learn")),
    ("deep learning", ("DeepLearning.AI", "fast.ai", "Dive into Deep Learning")),
    ("tensorflow", ("TensorFlow Tutorials", "DeepLearning.AI", "Kaggle Learn")),
    ("pytorch", ("PyTorch Tutorials", "fast.ai", "Dive into Deep Learning")),
    ("pandas", ("pandas Docs", "Kaggle Learn", "Real Python")),
    ("data", ("Kaggle Learn", "DataCamp", "Mode Analytics")),
    # Methodologies
    ("agile", ("Atlassian Agile Coach", "Scrum.org", "Coursera Agile")),
    ("scrum", ("Scrum Guide", "Scrum.org", "Atlassian Agile Coach")),
    ("ci/cd", ("GitHub Actions Docs", "GitLab CI Docs", "KodeKloud")),
    ("git", ("Pro Git", "Learn Git Branching", "Atlassian Git Tutorials")),
    # Testing
    ("jest", ("Jest Docs", "Testing JavaScript", "Egghead.io")),
    ("pytest", ("pytest Docs", "Real Python", "Test & Code")),
    ("selenium", ("Selenium Docs", "Test Automation University", "Udemy")),
    ("testing", ("Test Automation University", "Ministry of Testing", "Udemy")),
)

GENERIC_RESOURCES: tuple[str, ...] = ("Coursera", "Udemy", "LinkedIn Learning", "YouTube")

_RESOURCE_PATTERNS: tuple[tuple[re.Pattern, tuple[str, ...]], ...] = tuple(
    (_term_pattern(key), resources) for key, resources in LEARNING_RESOURCES
)


def matches_any(skill: str, terms: frozenset[str]) -> bool:
    """True if a term occurs in the skill, or the skill is an alias of one.

    The alias step covers one-word spellings such as "mysql" (sql) or
    "reactjs" (react) that a token search can't see.
    """
    if any(contains_term(skill, term) for term in terms):
        return True
    return not skill_groups(skill).isdisjoint(terms)


def learning_resources_for(skill: str) -> list[str]:
    """Resources for a normalized skill; generic MOOC platforms when nothing fits.

    Keys are searched in the skill text first, then among the canonical
    groups the skill belongs to.
    """
    for pattern, resources in _RESOURCE_PATTERNS:
        if pattern.search(skill):
            return list(resources)
    groups = skill_groups(skill)
    for key, resources in LEARNING_RESOURCES:
        if key in groups:
            return list(resources)
    return list(GENERIC_RESOURCES)
