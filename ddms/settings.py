#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Package settings, injected into readers, registries and components."""
import dataclasses as dc
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ddms.exceptions import DdmsKeyError
from ddms.names import DEFAULT_PREFIXES
from ddms.arguments import OptionalBooleanOption, VersionOption, \
    DefuseOption, PathOption, PrefixesOption

if TYPE_CHECKING:
    from ddms.versions import DdmsVersion  # noqa: F401


@dc.dataclass
class DdmsSettings:
    """Settings for reading, building and serializing DDMS components."""

    prefixes: PrefixesOption = PrefixesOption(default=None)
    """
    An optional mapping from vocabulary keys ('ddms', 'gml', 'ism', 'ntk',
    'tspi', 'virt', 'xlink') to namespace prefixes. Missing vocabularies
    are mapped with the default prefixes.
    """

    schema_dir: PathOption = PathOption(default=None)
    """
    The base directory of the schema resources. The schema paths of the
    version descriptors are relative to this directory.
    """

    default_version: VersionOption = VersionOption(default=None)
    """
    A configured fallback version, used when no current version is selected.
    For default there is no fallback.
    """

    defuse: DefuseOption = DefuseOption(default='remote')
    """
    Defines when to defuse XML data before parsing. Can be 'always', 'remote',
    'nonlocal' or 'never'. For default defuses only remote XML data.
    """

    schema_validation: OptionalBooleanOption = OptionalBooleanOption(default=None)
    """
    Validate XML sources against the schema of their version. For default
    validates only if a schema resource is available.
    """

    def get_prefix(self, vocabulary: str) -> str:
        """Returns the namespace prefix of a vocabulary."""
        if self.prefixes and vocabulary in self.prefixes:
            return self.prefixes[vocabulary]

        try:
            return DEFAULT_PREFIXES[vocabulary]
        except KeyError:
            raise DdmsKeyError(f"unknown vocabulary {vocabulary!r}") from None

    def get_namespaces(self, version: 'DdmsVersion') -> dict[str, str]:
        """Returns a map from prefixes to namespace URIs of the vocabularies of a version."""
        return {self.get_prefix(k): v for k, v in version.namespaces.items()}

    def get_schema_path(self, version: 'DdmsVersion',
                        vocabulary: str = 'ddms') -> Optional[Path]:
        """
        Returns the path of the schema resource of a vocabulary, `None` if the
        schema directory is not configured or if the version has no such schema.
        """
        if self.schema_dir is None:
            return None

        try:
            location = version.schemas[vocabulary]
        except KeyError:
            return None
        else:
            return self.schema_dir.joinpath(location.lstrip('/'))


DEFAULT_SETTINGS = DdmsSettings()
