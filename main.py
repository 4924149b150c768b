import asyncio
import json
import sys

from ecoflowcloud import Config, EcoFlowError, SignedApiClient


async def main(serial: str | None = None):
    if not Config.validate():
        print("Set ECOFLOW_ACCESS_KEY and ECOFLOW_SECRET_KEY (environment or .env)")
        return 1

    async with SignedApiClient() as client:
        try:
            devices = await client.get_devices()
            for device in devices:
                state = "online" if device.online else "offline"
                print(f"{device.sn}  {device.device_name or device.product_name}  {state}")

            if serial:
                status = await client.is_device_online(serial)
                print(f"{serial}: {status.value}")
                quota = await client.get_device(serial)
                print(json.dumps(quota, indent=2))
        except EcoFlowError as e:
            print(type(e).__name__, str(e))
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))
