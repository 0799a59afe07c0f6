"""
Ordering of fetched repositories for display.
"""


def rank_repos(repos):
    """
    Sort repositories by star count, most starred first.

    The list is sorted in place and returned. Repositories with the same
    star count have no guaranteed relative order.
    """
    repos.sort(key=lambda repo: repo.stars, reverse=True)
    return repos
