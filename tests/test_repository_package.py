from app import addressing, repository


def test_repository_is_package_with_public_api() -> None:
    assert repository.__file__ is not None
    assert repository.__file__.endswith("app/repository/__init__.py")

    expected_exports = [
        "create_vlan",
        "list_vlans",
        "create_vlan_interface",
        "find_ip_address",
        "bulk_insert_ip_addresses",
        "query_ip_addresses",
        "delete_free_ip_addresses",
    ]
    for export_name in expected_exports:
        assert hasattr(repository, export_name), f"Missing export: {export_name}"


def test_repository___all___contains_public_symbols() -> None:
    assert "create_vlan" in repository.__all__
    assert "query_ip_addresses" in repository.__all__
    assert all(not name.startswith("_") for name in repository.__all__)
    assert all(hasattr(repository, name) for name in repository.__all__)


def test_addressing_package_exports_core_operations() -> None:
    for export_name in (
        "parse_network",
        "generate_sequential_addresses",
        "bulk_add",
        "find_free_addresses",
    ):
        assert export_name in addressing.__all__
        assert callable(getattr(addressing, export_name))
