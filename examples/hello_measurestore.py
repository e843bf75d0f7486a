import measurestore
from measurestore import MEASUREMENT_ADDED, MEASUREMENT_UPDATED, ValueType


def main() -> None:
    svc = measurestore.MeasurementService()

    svc.subscribe(MEASUREMENT_ADDED, lambda m: print("added", m["id"], m.get("label")), "tumors")
    sub = svc.subscribe(MEASUREMENT_UPDATED, lambda m: print("updated", m["id"], m.get("area")), "tumors")

    mid = svc.add_or_update(
        {"label": "Lesion A", "type": ValueType.ELLIPSE.value, "area": 12.5, "points": [[0, 0], [4, 3]]},
        "tumors",
    )
    svc.add_or_update({"id": mid, "label": "Lesion A", "type": ValueType.ELLIPSE.value, "area": 13.0}, "tumors")
    sub.unsubscribe()

    print(svc.get_measurements("tumors"))

    # Same data over HTTP.
    server = measurestore.run(port=0, service=svc)
    client = server.client()
    print(client.get_measurement_meta(mid, "tumors"))


if __name__ == "__main__":
    main()
