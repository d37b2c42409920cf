"""Application context with dependency injection.

The ScaffoldContext dataclass holds all collaborators (registry client, package
installer, prompter, feedback) and is created once at CLI entry point, then
threaded through commands via Click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from ui_scaffold.package_manager.abc import PackageInstaller
from ui_scaffold.prompts.abc import Prompter
from ui_scaffold.registry.abc import RegistryClient
from ui_scaffold.user_feedback import UserFeedback


@dataclass(frozen=True)
class ScaffoldContext:
    """Immutable context holding all dependencies for ui-scaffold operations.

    Attributes:
        registry: Registry client for the index and component sources
        package_installer: Runs package manager install commands
        prompter: Interactive confirmations and component selection
        feedback: Progress output
        cwd: Directory commands operate on unless --cwd is given
        debug: Debug flag (verbose logging)
    """

    registry: RegistryClient
    package_installer: PackageInstaller
    prompter: Prompter
    feedback: UserFeedback
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        registry: RegistryClient | None = None,
        package_installer: PackageInstaller | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "ScaffoldContext":
        """Create test context with fakes for any unspecified collaborator.

        Example:
            >>> from ui_scaffold.registry.fake import FakeRegistryClient
            >>> ctx = ScaffoldContext.for_test(registry=FakeRegistryClient(), cwd=tmp_path)
        """
        from ui_scaffold.package_manager.fake import FakePackageInstaller
        from ui_scaffold.prompts.fake import FakePrompter
        from ui_scaffold.registry.fake import FakeRegistryClient
        from ui_scaffold.user_feedback import RecordingFeedback

        return ScaffoldContext(
            registry=registry if registry is not None else FakeRegistryClient(),
            package_installer=(
                package_installer if package_installer is not None else FakePackageInstaller()
            ),
            prompter=prompter if prompter is not None else FakePrompter(),
            feedback=feedback if feedback is not None else RecordingFeedback(),
            cwd=cwd if cwd is not None else Path("/fake/project"),
            debug=debug,
        )


def create_context(*, debug: bool, cwd: Path | None = None) -> ScaffoldContext:
    """Create production context with real implementations.

    Called once at CLI entry point.
    """
    from ui_scaffold.package_manager.real import RealPackageInstaller
    from ui_scaffold.prompts.real import ClickPrompter
    from ui_scaffold.registry.http import HttpRegistryClient
    from ui_scaffold.user_feedback import InteractiveFeedback

    return ScaffoldContext(
        registry=HttpRegistryClient(),
        package_installer=RealPackageInstaller(),
        prompter=ClickPrompter(),
        feedback=InteractiveFeedback(),
        cwd=cwd if cwd is not None else Path.cwd(),
        debug=debug,
    )
