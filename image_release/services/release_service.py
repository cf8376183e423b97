import logging
from typing import override

from pydantic import TypeAdapter

from image_release.clients import DockerClient, ImageRegistryClient
from image_release.clients.interfaces import Authenticator, Builder, Publisher
from image_release.models import ImageTag, PipelineConfig, ReleasePlan, ReleaseVersion
from image_release.repositories import ManifestRepository
from image_release.services.service import Service
from image_release.utils.logging import setup_logger


class ReleaseService(Service):
    """Resolve, build, authenticate, tag and publish; the first failure ends the run."""

    def __init__(
        self,
        config: PipelineConfig,
        builder: Builder | None = None,
        authenticator: Authenticator | None = None,
        publisher: Publisher | None = None,
        registry: ImageRegistryClient | None = None,
        dry_run: bool = False,
    ):
        self.config: PipelineConfig = config
        self.manifests: ManifestRepository = ManifestRepository(config.manifest, config.manifest_lines)
        docker = DockerClient()
        self.builder: Builder = builder if builder is not None else docker
        self.authenticator: Authenticator = authenticator if authenticator is not None else docker
        self.publisher: Publisher = publisher if publisher is not None else docker
        self.registry: ImageRegistryClient = (
            registry if registry is not None else ImageRegistryClient.for_registry(config.registry)
        )
        self.logger: logging.Logger = setup_logger("ReleaseService")
        self.dry_run: bool = dry_run

    @override
    def run(self) -> None:
        version = self.manifests.find_version()
        self.logger.info(f"Resolved version {version.number}")

        plan = self.plan(version)
        if self.dry_run:
            refs = ", ".join(t.reference for t in plan.tags)
            self.logger.info(f"Dry run mode. {self.config.image_name} would be published as {refs}")
            print(TypeAdapter(ReleasePlan).dump_json(plan, indent=2).decode())
            return

        self.logger.info(f"*** Building {self.config.image_name}")
        self.builder.build(self.config.image_name, self.config.dockerfile, self.config.context)

        self.authenticator.login(
            self.config.namespace,
            self.config.credential.get_secret_value(),
            self.config.registry,
        )

        self.logger.info(f"*** Tagging {self.config.repository}")
        for tag in plan.tags:
            self.publisher.tag(self.config.image_name, tag.reference)

        self.logger.info(f"*** Publishing {self.config.image_name}")
        for tag in plan.tags:
            self.publisher.push(tag.reference)

        if self.config.report_digests:
            self.report_digests(plan)

    def plan(self, version: ReleaseVersion) -> ReleasePlan:
        tags: list[ImageTag] = []
        # pre-release builds only ever move the unversioned tag
        if version.prerelease:
            self.logger.info(f"Version {version.number} is a pre-release, skipping versioned tag")
        else:
            tags.append(ImageTag(repository=self.config.repository, suffix=version.number))
        tags.append(ImageTag(repository=self.config.repository))
        return ReleasePlan(version=version, tags=tags)

    def report_digests(self, plan: ReleasePlan) -> None:
        path = f"{self.config.namespace}/{self.config.image_name}"
        for tag in plan.tags:
            digest = self.registry.resolve_digest(path, tag.suffix or "latest")
            if digest:
                self.logger.info(f"Published {tag.reference} -> {digest}")
            else:
                self.logger.warning(f"Could not resolve digest of {tag.reference}")
