from .base import RemoteFactory, RepositoryRemote
from .nexus_remote import NexusRemote

__all__ = ["NexusRemote", "RemoteFactory", "RepositoryRemote"]
