"""Autocomplete suggestions for partially typed queries."""

from __future__ import annotations

from types import MappingProxyType

MAX_SUGGESTIONS = 6

COMMON_TOPICS = (
    "git", "docker", "kubernetes", "python", "javascript", "typescript", "react", "vue",
    "angular", "node", "npm", "yarn", "bash", "powershell", "sql", "mongodb", "redis",
    "aws", "azure", "gcp", "linux", "vim", "regex", "css", "html", "java", "c#", "go",
    "ssh", "scp", "tmux", "ffmpeg", "curl", "kubectl", "helm", "podman", "nginx", "apache",
    "mysql", "postgresql", "elasticsearch", "webpack", "vscode", "jupyter", "conda", "pip",
)  # fmt: skip

# Follow-on phrases for topics people search most
SMART_SUGGESTIONS = MappingProxyType(
    {
        "git": (
            "git reset", "git commit", "git merge", "git rebase", "git stash",
            "git branch", "git checkout", "git log", "git diff", "git push",
            "git rm", "git add", "git pull", "git clone",
        ),
        "docker": (
            "docker build", "docker compose", "docker run", "docker volume",
            "docker network", "docker ps", "docker exec", "docker logs",
            "docker pull", "docker push",
        ),
        "kubernetes": (
            "kubectl get", "kubectl apply", "kubectl describe", "kubectl logs",
            "kubectl exec", "kubectl delete", "kubectl create", "kubectl port-forward",
        ),
        "k8s": (
            "kubectl get", "kubectl apply", "kubectl describe", "kubectl logs",
            "kubectl exec",
        ),
        "kubectl": (
            "kubectl get pods", "kubectl apply -f", "kubectl describe",
            "kubectl logs", "kubectl exec -it",
        ),
        "vim": ("vim navigation", "vim search", "vim replace", "vim commands", "vim modes"),
        "bash": (
            "bash loops", "bash conditionals", "bash variables", "bash functions",
            "bash arrays",
        ),
        "powershell": (
            "powershell cmdlets", "powershell variables", "powershell objects",
            "powershell loops",
        ),
        "regex": (
            "regex lookahead", "regex groups", "regex anchors", "regex quantifiers",
            "regex character classes",
        ),
        "sql": (
            "sql select", "sql join", "sql insert", "sql update", "sql delete",
            "sql create table",
        ),
        "python": (
            "python list", "python dict", "python functions", "python classes",
            "python loops",
        ),
        "javascript": (
            "javascript array", "javascript object", "javascript promises",
            "javascript async", "javascript dom",
        ),
        "js": (
            "javascript array", "javascript object", "javascript promises",
            "javascript async",
        ),
        "node": ("node modules", "node fs", "node http", "node express", "node package.json"),
        "npm": ("npm install", "npm run", "npm scripts", "npm publish", "npm update"),
        "yarn": ("yarn add", "yarn install", "yarn run", "yarn workspace"),
        "aws": ("aws s3", "aws ec2", "aws lambda", "aws cli", "aws iam"),
        "linux": (
            "linux commands", "linux permissions", "linux processes",
            "linux networking", "linux file system",
        ),
    }
)  # fmt: skip


def _smart_suggestions(term: str) -> list[str] | None:
    """Canned follow-ons, or None when no topic rule applies."""
    for topic, phrases in SMART_SUGGESTIONS.items():
        if term == topic:
            return list(phrases[:MAX_SUGGESTIONS])
        if term.startswith(topic + " "):
            rest = term[len(topic) + 1 :]
            return [p for p in phrases if rest in p][:MAX_SUGGESTIONS]
    return None


def _topic_suggestions(term: str) -> list[str]:
    exact = [t for t in COMMON_TOPICS if t == term][:2]
    prefixed = [t for t in COMMON_TOPICS if t.startswith(term) and t != term][:3]
    suggestions = exact + prefixed

    if len(suggestions) < 5:
        contained = [t for t in COMMON_TOPICS if term in t and not t.startswith(term)]
        suggestions += contained[: 5 - len(suggestions)]

    return suggestions


def autocomplete(term: str) -> list[str]:
    """Up to six query completions for ``term``.

    Known topics ("git", "docker ...") complete from curated phrases;
    anything else is matched against a list of common topics.
    """
    term = term.strip().lower()
    if not term:
        return []

    suggestions = _smart_suggestions(term) or _topic_suggestions(term)
    return list(dict.fromkeys(suggestions))[:MAX_SUGGESTIONS]
