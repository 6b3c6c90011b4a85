from .addresses import (
    bulk_insert_ip_addresses,
    delete_free_ip_addresses,
    delete_ip_address,
    find_ip_address,
    get_ip_address_by_id,
    list_ip_addresses_for_vlan,
    query_ip_addresses,
    set_ip_address_interface,
)
from .vlans import (
    create_vlan,
    create_vlan_interface,
    delete_vlan,
    get_vlan_by_id,
    get_vlan_interface_by_id,
    list_vlan_interfaces,
    list_vlans,
    update_vlan,
)

__all__ = [name for name in globals() if not name.startswith("_")]
