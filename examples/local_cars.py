"""
DynamoDB Local — the Cars walkthrough against a real endpoint.

Needs DynamoDB Local on http://localhost:8000 (or DYNAMODE_ENDPOINT_URL).
Table creation is plain boto3; dynamode only maps items.
"""

from kungfu import Ok, Error

from dynamode import agent as A
from examples._infra import banner, run, Car


def ensure_table(client: A.Boto3Client, name: str) -> None:
    raw = client.client
    if name in raw.list_tables().get("TableNames", []):
        print(f"{name} table already exists.")
        return

    print(f"Creating {name} table...")
    raw.create_table(
        TableName=name,
        AttributeDefinitions=[
            {"AttributeName": "pk", "AttributeType": "S"},
            {"AttributeName": "sk", "AttributeType": "S"},
        ],
        KeySchema=[
            {"AttributeName": "pk", "KeyType": "HASH"},
            {"AttributeName": "sk", "KeyType": "RANGE"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"{name} table created!")


async def main() -> None:
    banner("DynamoDB Local: Cars")

    settings = A.get_settings()
    client = A.Boto3Client.connect_local(settings)
    agent = A.DynamodeAgent(client, policy=settings.policy)

    ensure_table(client, Car.table_name())

    car = Car(pk="tesla", sk="model-y", brand="Tesla", model="Model Y", horsepower=420)
    match await agent.put(car):
        case Ok(_):
            print("Car inserted.")
        case Error(e):
            print(f"Insert failed: {e}")

    match await agent.get(Car, ("tesla", "model-y")):
        case Ok(None):
            print("No car found.")
        case Ok(found):
            print(f"Found car: {found}")
        case Error(e):
            print(f"Fetch failed: {e}")

    print(f"Current tables: {client.client.list_tables().get('TableNames', [])}")


if __name__ == "__main__":
    run(main)
