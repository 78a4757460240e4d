"""Geographic clustering of stations into city clusters."""

from collections.abc import Iterable, Sequence

from radio_orbit.domain.models.city_cluster import CityCluster
from radio_orbit.domain.models.station import Station

MIN_KEY_LENGTH = 2
UNKNOWN_CLUSTER_NAME = "Unknown"


def cluster_key(station: Station) -> str:
    """Normalized grouping key: trimmed lower-case city, else state."""
    return (station.city or station.state).strip().lower()


class GeoClusteringService:
    """Groups stations by place name and places each group at its centroid."""

    def cluster(self, stations: Iterable[Station]) -> list[CityCluster]:
        """Build clusters from scratch for the given stations.

        Groups appear in order of their first member. Stations whose key is
        shorter than two characters are left out. Only geolocated members
        contribute to the centroid, and a group without any is dropped.
        """
        groups: dict[str, list[Station]] = {}
        for station in stations:
            key = cluster_key(station)
            if len(key) < MIN_KEY_LENGTH:
                continue
            groups.setdefault(key, []).append(station)

        clusters: list[CityCluster] = []
        for group in groups.values():
            cluster = self._build_cluster(group)
            if cluster is not None:
                clusters.append(cluster)
        return clusters

    @staticmethod
    def _build_cluster(group: Sequence[Station]) -> CityCluster | None:
        located = [station for station in group if station.is_geolocated]
        if not located:
            return None

        lat = sum(float(station.geo_lat) for station in located) / len(located)  # type: ignore[arg-type]
        lng = sum(float(station.geo_long) for station in located) / len(located)  # type: ignore[arg-type]
        first = group[0]
        return CityCluster(
            name=first.city or first.state or UNKNOWN_CLUSTER_NAME,
            lat=lat,
            lng=lng,
            station_count=len(group),
        )

    @staticmethod
    def find_cluster(clusters: Iterable[CityCluster], city_name: str | None) -> CityCluster | None:
        """Find the cluster whose display name equals ``city_name`` exactly."""
        if not city_name:
            return None
        return next((cluster for cluster in clusters if cluster.name == city_name), None)
