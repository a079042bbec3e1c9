"""
Weighted spherical k-means in L*a*b*.

Refines starting clusters (normally Wu's boxes) with Lloyd iterations over
the distinct colors of an image, each weighted by its population.
"""

import numpy as np

from .color_utils import argb_from_lab_array, lab_from_argb_array


# =============================================================================
# Constants
# =============================================================================

MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0  # Delta E a point must gain to change cluster
RANDOM_SEED = 0x42688
CHUNK_SIZE = 16_384  # Points per distance-matrix block


class QuantizerWsmeans:
    """Weighted k-means with deterministic initial assignments."""

    @staticmethod
    def quantize(input_counts: dict, starting_clusters, max_colors: int) -> dict:
        """
        Cluster colors weighted by population.

        Args:
            input_counts: Dict of argb -> population
            starting_clusters: ARGB colors to start from; may be empty
            max_colors: Upper bound on the number of clusters

        Returns:
            Dict of cluster argb -> total population. Clusters that round
            to the same ARGB are merged, so populations sum to the input's.
        """
        if not input_counts or max_colors < 1:
            return {}

        rng = np.random.default_rng(RANDOM_SEED)

        pixels = np.fromiter(input_counts.keys(), dtype=np.int64, count=len(input_counts))
        counts = np.fromiter(input_counts.values(), dtype=np.int64, count=len(input_counts))
        points = lab_from_argb_array(pixels)
        point_count = len(points)

        starting_clusters = list(starting_clusters)
        cluster_count = min(max_colors, point_count)
        if starting_clusters:
            cluster_count = min(cluster_count, len(starting_clusters))

        clusters = np.zeros((cluster_count, 3), dtype=np.float64)
        seeds = starting_clusters[:cluster_count]
        if seeds:
            clusters[:len(seeds)] = lab_from_argb_array(np.array(seeds, dtype=np.int64))
        additional_clusters_needed = cluster_count - len(seeds)
        if additional_clusters_needed > 0:
            chosen = rng.choice(point_count, size=additional_clusters_needed, replace=False)
            clusters[len(seeds):] = points[chosen]

        cluster_indices = rng.integers(0, cluster_count, size=point_count)
        pixel_count_sums = np.zeros(cluster_count, dtype=np.int64)

        for iteration in range(MAX_ITERATIONS):
            points_moved = 0
            for start in range(0, point_count, CHUNK_SIZE):
                stop = min(start + CHUNK_SIZE, point_count)
                points_moved += _reassign(points[start:stop], clusters,
                                          cluster_indices[start:stop])

            if points_moved == 0 and iteration != 0:
                break

            pixel_count_sums = np.bincount(cluster_indices, weights=counts,
                                           minlength=cluster_count).astype(np.int64)
            sums = np.zeros((cluster_count, 3), dtype=np.float64)
            for axis in range(3):
                sums[:, axis] = np.bincount(cluster_indices, weights=points[:, axis] * counts,
                                            minlength=cluster_count)
            occupied = pixel_count_sums > 0
            clusters[occupied] = sums[occupied] / pixel_count_sums[occupied, None]
            clusters[~occupied] = 0.0

        argb_to_population = {}
        cluster_argbs = argb_from_lab_array(clusters)
        for i in range(cluster_count):
            count = int(pixel_count_sums[i])
            if count == 0:
                continue
            argb = int(cluster_argbs[i])
            argb_to_population[argb] = argb_to_population.get(argb, 0) + count
        return argb_to_population


def _reassign(points: np.ndarray, clusters: np.ndarray, indices: np.ndarray) -> int:
    """
    Move points to their nearest cluster, in place.

    A point moves only when the nearest cluster is closer than its current
    one by more than MIN_MOVEMENT_DISTANCE.

    Returns:
        Number of points moved
    """
    differences = points[:, None, :] - clusters[None, :, :]
    distances = np.einsum('ijk,ijk->ij', differences, differences)

    rows = np.arange(len(points))
    previous_distance = distances[rows, indices]
    nearest = np.argmin(distances, axis=1)
    minimum_distance = distances[rows, nearest]

    distance_change = np.abs(np.sqrt(minimum_distance) - np.sqrt(previous_distance))
    moved = (minimum_distance < previous_distance) & (distance_change > MIN_MOVEMENT_DISTANCE)
    indices[moved] = nearest[moved]
    return int(moved.sum())
