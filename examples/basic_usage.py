"""
Basic usage examples for the Gerrit groups client.

This example demonstrates:
- Client initialization
- Creating and looking up groups
- Listing and querying groups
- Error handling
"""

from gerrit_groups import ApiError, GerritClient, GroupExistsError, GroupInput, ListGroupsOption


def main():
    """Main example function."""

    with GerritClient(base_url="http://localhost:8080", username="admin", password="secret") as client:
        try:
            # Create a group, unless it exists already
            print("➕ Creating group...")
            try:
                group = client.groups.create(GroupInput(name="example-reviewers", description="Example reviewers"))
                print(f"✅ Created group: {group.name()} (ID: {group.id})")
            except GroupExistsError:
                group = client.groups.id("example-reviewers")
                print(f"ℹ️  Group exists: {group.name()} (ID: {group.id})")
            print()

            # Add members
            print("👥 Adding members...")
            for member in group.add_members("admin"):
                print(f"  • {member.name or member.username}")
            print()

            # List groups owned by the caller, with members
            print("📋 Listing owned groups...")
            owned = client.groups.list().with_owned(True).add_option(ListGroupsOption.MEMBERS).get()
            print(f"✅ Found {len(owned)} groups")
            for info in owned[:5]:
                print(f"  • {info.name} ({len(info.members or [])} members)")
            print()

            # Query groups by name
            print("🔍 Querying groups...")
            for info in client.groups.query("inname:example").with_limit(10).get():
                print(f"  • {info.name} (ID: {info.id})")

        except ApiError as e:
            print(f"❌ API Error: {e}")
            print(f"   Status: {e.status_code}")


if __name__ == "__main__":
    main()
