"""
Analytics Module
=================

This module provides aggregate queries over one account's flock and
breeding records. It powers the dashboard counters and the species and
season overviews.

Classes:
    AnalyticsQueries: Static methods for the aggregate queries.

Example:
    Getting the dashboard counters::

        from apps.analytics.analytics import AnalyticsQueries

        stats = AnalyticsQueries.statistics(owner_id=user.id)
        print(f"{stats['active_birds']} of {stats['total_birds']} birds active")
        print(f"{stats['hatched_eggs']} eggs hatched")

Note:
    This module is read-only and doesn't modify any data. All methods
    are static and can be called without instantiation. Dangling
    references never raise; they are simply not counted where a join is
    needed.
"""

from django.db.models import Count, Q
from apps.aviaries.models import Aviary
from apps.birds.models import Bird, BirdStatus
from apps.breeding.models import Couple, Nest, Egg, EggStatus


class AnalyticsQueries:
    """
    Aggregate queries for analytics endpoints.

    Methods:
        statistics: Dashboard counters for birds, couples, nests, eggs and aviaries.
        species_breakdown: Birds per species.
        season_summary: Couples, nests and hatched eggs per breeding season.

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def statistics(owner_id):
        """
        Count the account's records in one pass per collection.

        Args:
            owner_id (UUID): The account's user id.

        Returns:
            dict: A dictionary containing:
                - total_birds (int): All birds, whatever their status.
                - active_birds (int): Birds with status 'active'.
                - total_couples (int) / active_couples (int)
                - total_nests (int) / active_nests (int)
                - total_eggs (int): All egg records.
                - hatched_eggs (int): Egg records with status 'hatched'.
                - total_aviaries (int)

        Example:
            An empty account::

                AnalyticsQueries.statistics(user.id)
                # {'total_birds': 0, 'active_birds': 0, ...}
        """
        birds = Bird.objects.filter(owner_id=owner_id).aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(status=BirdStatus.ACTIVE)),
        )
        couples = Couple.objects.filter(owner_id=owner_id).aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(active=True)),
        )
        nests = Nest.objects.filter(owner_id=owner_id).aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(active=True)),
        )
        eggs = Egg.objects.filter(owner_id=owner_id).aggregate(
            total=Count('id'),
            hatched=Count('id', filter=Q(status=EggStatus.HATCHED)),
        )

        return {
            'total_birds': birds['total'],
            'active_birds': birds['active'],
            'total_couples': couples['total'],
            'active_couples': couples['active'],
            'total_nests': nests['total'],
            'active_nests': nests['active'],
            'total_eggs': eggs['total'],
            'hatched_eggs': eggs['hatched'],
            'total_aviaries': Aviary.objects.filter(owner_id=owner_id).count(),
        }

    @staticmethod
    def species_breakdown(owner_id):
        """
        Count birds per species.

        Args:
            owner_id (UUID): The account's user id.

        Returns:
            list[dict]: One entry per species, largest first, each with
            species, total, active, male, female and unknown counts.
        """
        rows = (
            Bird.objects
            .filter(owner_id=owner_id)
            .values('species')
            .annotate(
                total=Count('id'),
                active=Count('id', filter=Q(status=BirdStatus.ACTIVE)),
                male=Count('id', filter=Q(gender='male')),
                female=Count('id', filter=Q(gender='female')),
                unknown=Count('id', filter=Q(gender='unknown')),
            )
            .order_by('-total', 'species')
        )
        return list(rows)

    @staticmethod
    def season_summary(owner_id, season=None):
        """
        Summarize breeding results per season.

        A nest belongs to the season of its couple; nests whose couple no
        longer exists are left out.

        Args:
            owner_id (UUID): The account's user id.
            season (str, optional): Only summarize this season.

        Returns:
            list[dict]: One entry per season, newest first, each with
            season, couples, active_couples, nests, hatched_eggs and
            birds_hatched (sum of the nests' recorded hatch counts).
        """
        couples = Couple.objects.filter(owner_id=owner_id)
        if season:
            couples = couples.filter(season=season)

        season_by_couple = dict(couples.values_list('id', 'season'))

        summary = {}
        for couple_season in sorted(set(season_by_couple.values()), reverse=True):
            summary[couple_season] = {
                'season': couple_season,
                'couples': 0,
                'active_couples': 0,
                'nests': 0,
                'hatched_eggs': 0,
                'birds_hatched': 0,
            }

        for couple in couples.only('season', 'active'):
            summary[couple.season]['couples'] += 1
            if couple.active:
                summary[couple.season]['active_couples'] += 1

        season_by_nest = {}
        nests = Nest.objects.filter(owner_id=owner_id, couple_id__in=list(season_by_couple))
        for nest in nests.only('id', 'couple_id', 'hatched_count'):
            nest_season = season_by_couple[nest.couple_id]
            season_by_nest[nest.id] = nest_season
            summary[nest_season]['nests'] += 1
            summary[nest_season]['birds_hatched'] += nest.hatched_count or 0

        hatched = (
            Egg.objects
            .filter(owner_id=owner_id, nest_id__in=list(season_by_nest), status=EggStatus.HATCHED)
            .values_list('nest_id', flat=True)
        )
        for nest_id in hatched:
            summary[season_by_nest[nest_id]]['hatched_eggs'] += 1

        return list(summary.values())
