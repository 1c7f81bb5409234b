"""
Intercepts imports of optional packages (e.g. geographiclib, used by the Karney
calculators) to either:
    - Explain which extra needs to be installed, or
    - pip install it, if auto-download has been switched on
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Dict, List, Union

from geosimplify.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    A sys.meta_path finder consulted only after every regular finder has failed,
    i.e. when an optional package is genuinely missing.

    Only packages registered through .permit_packages() are acted upon; any other
    missing import raises the usual ModuleNotFoundError. geosimplify registers its
    optional packages in its __init__.py:

        ConditionalPackageInterceptor.permit_packages({'geographiclib': 'geosimplify[karney]'})
        sys.meta_path.append(ConditionalPackageInterceptor)

    """

    PERMITTED_PACKAGES: Dict[str, str] = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[List[str], Dict[str, str]]) -> None:
        """
        Registers optional packages.

        As a list, each package is installed under its import name. As a dict, the
        value is the pip requirement to install for the import name in the key, e.g.
            {'geographiclib': 'geosimplify[karney]'}

        Args:
            packages:
                The import names (and optionally their pip requirements)

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether packages may be auto-downloaded or not. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once all other finders have failed to locate a module.
        Not intended to be called directly.
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        requirement = cls.PERMITTED_PACKAGES[name]
        if cls.AUTO_DOWNLOAD:
            LOGGER.warning('Module %r not installed. Attempting to pip install %s', name, requirement)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', requirement],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"You are attempting to use a feature which requires an optional package ({name}). "
            "Please choose one of the following options to continue: \n\n"
            "1) Enable package auto-installation using: \n"
            "    from geosimplify.utils.conditional_imports import ConditionalPackageInterceptor \n"
            "    ConditionalPackageInterceptor.permit_auto_download(True) \n\n"
            "2) Pip install the package yourself using the following command: \n"
            f"    pip install {requirement}"
        )
