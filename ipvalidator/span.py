#
#
#

from collections import namedtuple
from ipaddress import ip_network
from logging import getLogger

IPV4 = 'IPv4'
IPV6 = 'IPv6'

_FAMILIES = {4: IPV4, 6: IPV6}


class Span(namedtuple('Span', 'network family first last')):
    '''
    The inclusive [first, last] block of addresses covered by an address or
    CIDR range.

    A bare address, `1.2.3.4` or `::1`, is a span of one, as are `/32` and
    `/128` networks. Host bits are masked off so `1.2.3.4/16` covers
    `1.2.0.0` through `1.2.255.255`.
    '''

    log = getLogger('Span')

    @classmethod
    def parse(cls, value):
        '''
        Returns the Span for `value` or None when it isn't a valid address or
        CIDR range of either family. IPv4 netmasks, `1.2.3.4/255.255.0.0`,
        are accepted, hostmasks and IPv6 zone ids are not.
        '''
        if not isinstance(value, str) or not value:
            return None
        address, _, mask = value.partition('/')
        if '%' in address:
            cls.log.debug('parse: zone id, value=%s', value)
            return None
        try:
            network = ip_network(value, strict=False)
        except ValueError:
            cls.log.debug('parse: invalid value=%s', value)
            return None
        if '.' in mask and str(network.netmask) != mask:
            cls.log.debug('parse: hostmask, value=%s', value)
            return None
        return cls(
            network,
            _FAMILIES[network.version],
            network.network_address,
            network.broadcast_address,
        )

    @property
    def size(self):
        return self.network.num_addresses

    @property
    def is_address(self):
        return self.first == self.last

    @property
    def is_range(self):
        return self.first != self.last

    def contains(self, other):
        if self.family != other.family:
            return False
        return other.first >= self.first and other.last <= self.last

    def __repr__(self):
        return f'Span<{self.family} {self.first}-{self.last}>'
