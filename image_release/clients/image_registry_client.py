import re
import requests
import logging

logger = logging.getLogger(__name__)

MANIFEST_MEDIA_TYPES = ", ".join([
    "application/vnd.oci.image.index.v1+json",
    "application/vnd.oci.image.manifest.v1+json",
    "application/vnd.docker.distribution.manifest.list.v2+json",
    "application/vnd.docker.distribution.manifest.v2+json",
])
CHALLENGE_PARAM = re.compile(r'(\w+)="([^"]*)"')


class ImageRegistryClient:
    def __init__(self, registry_url: str = "https://registry-1.docker.io"):
        self.registry_url: str = registry_url

    @classmethod
    def for_registry(cls, registry: str | None) -> "ImageRegistryClient":
        if not registry:
            return cls()
        return cls(f"https://{registry}")

    def resolve_digest(self, repository: str, tag: str = "latest") -> str | None:
        url = f"{self.registry_url}/v2/{repository}/manifests/{tag}"
        headers = {"Accept": MANIFEST_MEDIA_TYPES}

        try:
            response = requests.head(url=url, headers=headers, timeout=5)
            if response.status_code == 401:
                token = self._pull_token(response.headers.get("WWW-Authenticate", ""), repository)
                if token:
                    headers["Authorization"] = f"Bearer {token}"
                    response = requests.head(url=url, headers=headers, timeout=5)
            if response.status_code == 200:
                digest = response.headers.get("Docker-Content-Digest")
                if digest:
                    return digest
                else:
                    logger.warning(f"No digest found in headers for {repository}:{tag}")
            else:
                logger.warning(f"Failed to resolve digest: {repository}:{tag} (status code {response.status_code})")
        except Exception as e:
            logger.error(f"Error resolving digest for {repository}:{tag}: {e}")
        return None

    def _pull_token(self, challenge: str, repository: str) -> str | None:
        if not challenge.lower().startswith("bearer "):
            return None
        params = dict(CHALLENGE_PARAM.findall(challenge))
        realm = params.pop("realm", None)
        if not realm:
            return None
        params.setdefault("scope", f"repository:{repository}:pull")
        response = requests.get(url=realm, params=params, timeout=5)
        if response.status_code != 200:
            logger.warning(f"Token request to {realm} failed (status code {response.status_code})")
            return None
        body = response.json()
        return body.get("token") or body.get("access_token")
