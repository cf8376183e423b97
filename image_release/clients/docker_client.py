import subprocess
import logging

from image_release.errors import AuthenticationError, BuildError, PushError, TagError

logger = logging.getLogger(__name__)


class DockerClient:
    """Builder, Authenticator and Publisher backed by the docker CLI."""

    def __init__(self, executable: str = "docker"):
        self.executable: str = executable

    def build(self, image_name: str, dockerfile: str, context: str) -> None:
        cmd = [self.executable, "build", "-t", image_name, "-f", dockerfile, context]
        result = subprocess.run(cmd, check=False)
        if result.returncode != 0:
            logger.error(f"docker build failed with code {result.returncode}")
            raise BuildError(f"Failed to build image {image_name}", result.returncode)

    def login(self, username: str, password: str, registry: str | None = None) -> None:
        # the secret is fed on stdin so it never appears in the process list
        cmd = [self.executable, "login", "-u", username, "--password-stdin"]
        if registry:
            cmd.append(registry)
        result = subprocess.run(cmd, check=False, input=password, text=True)
        if result.returncode != 0:
            logger.error(f"docker login failed with code {result.returncode}")
            raise AuthenticationError(f"Failed to authenticate {username} against {registry or 'docker hub'}", result.returncode)

    def tag(self, source: str, target: str) -> None:
        cmd = [self.executable, "tag", source, target]
        result = subprocess.run(cmd, check=False)
        if result.returncode != 0:
            logger.error(f"docker tag failed with code {result.returncode}")
            raise TagError(f"Failed to tag {source} as {target}", result.returncode)

    def push(self, reference: str) -> None:
        cmd = [self.executable, "push", reference]
        result = subprocess.run(cmd, check=False)
        if result.returncode != 0:
            logger.error(f"docker push failed with code {result.returncode}")
            raise PushError(f"Failed to push {reference}", result.returncode)
