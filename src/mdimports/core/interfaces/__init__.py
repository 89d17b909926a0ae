from .exec import CommandRunnerProtocol
from .fs import PathResolverProtocol
from .net import ContentAdmissionPolicyProtocol, HTTPTransportProtocol, RemoteContentGateProtocol

__all__ = [
    'CommandRunnerProtocol',
    'PathResolverProtocol',
    'ContentAdmissionPolicyProtocol',
    'HTTPTransportProtocol',
    'RemoteContentGateProtocol',
]
