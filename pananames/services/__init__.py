"""
Service layer - one service per group of merchant API endpoints
"""

from pananames.services.base_service import BaseService
from pananames.services.account import AccountService
from pananames.services.domains import DomainService
from pananames.services.name_servers import NameServerService
from pananames.services.whois import WhoisService
from pananames.services.transfers import TransferService
from pananames.services.redirects import RedirectService
from pananames.services.tlds import TLDService
from pananames.services.pagination import iter_pages

__all__ = [
    "BaseService",
    # Resources
    "AccountService",
    "DomainService",
    "NameServerService",
    "WhoisService",
    "TransferService",
    "RedirectService",
    "TLDService",
    # Paging
    "iter_pages",
]
