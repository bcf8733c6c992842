"""
Name Server Service
Delegation, child name servers, hosted DNS records and DNSSEC of a domain
"""

from typing import List, Optional, Sequence

from pananames.api.client import RequestOption
from pananames.api.exceptions import ValidationError
from pananames.schemas.name_servers import (
    ChildNameServer,
    DNSSec,
    DeleteChildNameServerOptions,
    DeleteNameServerRecordOptions,
    EnableDNSSecOptions,
    NameServerRecord,
    SetNameServersOptions,
)
from pananames.services.base_service import BaseService
from pananames.utils.logger import get_logger
from pananames.utils.validators import require_options

logger = get_logger(__name__)


class NameServerService(BaseService):
    """Name server and DNS management for a domain"""

    # ==================== NAME SERVERS ====================

    def get_name_servers(self, domain: str, *request_options: RequestOption) -> List[str]:
        """Get the name servers a domain is delegated to"""
        return self._call(
            "GET", self._domain_path(domain, "name_servers"), target=List[str], request_options=request_options
        ).data

    def set_name_servers(
        self,
        domain: str,
        options: SetNameServersOptions,
        *request_options: RequestOption
    ) -> List[str]:
        """
        Delegate a domain to the given name servers.

        Raises:
            ValidationError: If options are missing
        """
        require_options(options, "SetNameServersOptions")
        path = self._domain_path(domain, "name_servers")
        logger.info(f"Setting name servers for {domain}: {', '.join(options.name_servers)}")
        return self._call("PUT", path, options, List[str], request_options).data

    def delete_name_servers(self, domain: str, *request_options: RequestOption) -> None:
        """Remove the name servers of a domain"""
        path = self._domain_path(domain, "name_servers")
        logger.info(f"Deleting name servers for {domain}")
        self._call("DELETE", path, request_options=request_options)

    # ==================== CHILD NAME SERVERS ====================

    def get_child_name_servers(self, domain: str, *request_options: RequestOption) -> List[ChildNameServer]:
        """Get the child (glue) name servers of a domain"""
        return self._call(
            "GET", self._domain_path(domain, "child_name_servers"),
            target=List[ChildNameServer], request_options=request_options
        ).data

    def add_child_name_server(
        self,
        domain: str,
        options: ChildNameServer,
        *request_options: RequestOption
    ) -> ChildNameServer:
        """Create a child name server under a domain"""
        require_options(options, "ChildNameServer")
        path = self._domain_path(domain, "child_name_servers")
        logger.info(f"Adding child name server {options.hostname} to {domain}")
        return self._call("POST", path, options, ChildNameServer, request_options).data

    def update_child_name_server(
        self,
        domain: str,
        options: ChildNameServer,
        *request_options: RequestOption
    ) -> ChildNameServer:
        """Change the addresses of an existing child name server"""
        require_options(options, "ChildNameServer")
        path = self._domain_path(domain, "child_name_servers")
        logger.info(f"Updating child name server {options.hostname} of {domain}")
        return self._call("PUT", path, options, ChildNameServer, request_options).data

    def delete_child_name_server(
        self,
        domain: str,
        options: DeleteChildNameServerOptions,
        *request_options: RequestOption
    ) -> None:
        """Delete a child name server by hostname"""
        require_options(options, "DeleteChildNameServerOptions")
        path = self._domain_path(domain, "child_name_servers")
        logger.info(f"Deleting child name server {options.hostname} of {domain}")
        self._call("DELETE", path, options, request_options=request_options)

    # ==================== RECORDS ====================

    def get_name_server_records(self, domain: str, *request_options: RequestOption) -> List[NameServerRecord]:
        """Get the DNS records hosted for a domain"""
        return self._call(
            "GET", self._domain_path(domain, "name_server_records"),
            target=List[NameServerRecord], request_options=request_options
        ).data

    def add_name_server_record(
        self,
        domain: str,
        record: NameServerRecord,
        *request_options: RequestOption
    ) -> NameServerRecord:
        """Create a DNS record"""
        require_options(record, "NameServerRecord")
        path = self._domain_path(domain, "name_server_records")
        return self._call("POST", path, record, NameServerRecord, request_options).data

    def update_name_server_record(
        self,
        domain: str,
        record: NameServerRecord,
        *request_options: RequestOption
    ) -> NameServerRecord:
        """Update an existing DNS record, matched by id"""
        require_options(record, "NameServerRecord")
        path = self._domain_path(domain, "name_server_records")
        return self._call("PUT", path, record, NameServerRecord, request_options).data

    def delete_name_server_record(
        self,
        domain: str,
        options: DeleteNameServerRecordOptions,
        *request_options: RequestOption
    ) -> None:
        """Delete a DNS record by id"""
        require_options(options, "DeleteNameServerRecordOptions")
        path = self._domain_path(domain, "name_server_records")
        logger.info(f"Deleting record {options.id} of {domain}")
        self._call("DELETE", path, options, request_options=request_options)

    def set_bulk_name_server_records(
        self,
        domain: str,
        records: Sequence[NameServerRecord],
        *request_options: RequestOption
    ) -> List[NameServerRecord]:
        """
        Create several DNS records in one call.

        Raises:
            ValidationError: If records is empty
        """
        path = self._domain_path(domain, "bulk_name_server_records")
        records = self._require_records(records)
        logger.info(f"Creating {len(records)} records for {domain}")
        return self._call("POST", path, records, List[NameServerRecord], request_options).data

    def update_bulk_name_server_records(
        self,
        domain: str,
        records: Sequence[NameServerRecord],
        *request_options: RequestOption
    ) -> List[NameServerRecord]:
        """
        Update several existing DNS records in one call.

        Raises:
            ValidationError: If records is empty
        """
        path = self._domain_path(domain, "bulk_name_server_records")
        records = self._require_records(records)
        logger.info(f"Updating {len(records)} records for {domain}")
        return self._call("PUT", path, records, List[NameServerRecord], request_options).data

    @staticmethod
    def _require_records(records: Optional[Sequence[NameServerRecord]]) -> List[NameServerRecord]:
        if not records:
            raise ValidationError("name server record list can't be empty")
        return list(records)

    # ==================== DNSSEC ====================

    def get_dnssec(self, domain: str, *request_options: RequestOption) -> DNSSec:
        """Get DNSSEC status of a domain"""
        return self._call(
            "GET", self._domain_path(domain, "dnssec"), target=DNSSec, request_options=request_options
        ).data

    def enable_dnssec(
        self,
        domain: str,
        options: Optional[EnableDNSSecOptions] = None,
        *request_options: RequestOption
    ) -> DNSSec:
        """Enable DNSSEC, optionally with a DS record"""
        path = self._domain_path(domain, "dnssec")
        logger.info(f"Enabling DNSSEC for {domain}")
        return self._call("PUT", path, options, DNSSec, request_options).data

    def disable_dnssec(self, domain: str, *request_options: RequestOption) -> DNSSec:
        """Disable DNSSEC"""
        path = self._domain_path(domain, "dnssec")
        logger.info(f"Disabling DNSSEC for {domain}")
        return self._call("DELETE", path, target=DNSSec, request_options=request_options).data
