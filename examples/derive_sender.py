"""
Derive Sender Example

Describe an inbound connection from its headers and remote address.
"""
import sys

from sendermeta.core.geo.geoip_service import GeoIPService
from sendermeta.core.sender.derivation import SenderMetadataDeriver
from sendermeta.core.sender.sources import HeaderMapSource


def main(database_path: str):
    connection = HeaderMapSource(
        headers={
            "User-Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0",
            "Accept-Language": "de-CH,de;q=0.9,en;q=0.5",
        },
        addr="81.2.69.142",
    )

    with GeoIPService(database_path) as geo:
        sender = SenderMetadataDeriver(geo).derive(connection)

    # Absent fields are omitted
    print(sender.to_json())


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "GeoLite2-City.mmdb")
