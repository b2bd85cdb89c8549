# equipment/management/commands/seed_master_components.py

from django.core.management.base import BaseCommand

from equipment.models import MasterComponent

# (name, system, brand, series, model, size, lifespan_hours, lifespan_distance_km)
DEFAULT_CATALOG = [
    ("Chain", "Drivetrain", "Shimano", "Ultegra", "CN-HG701-11", "11-speed", 150, 3000),
    ("Chain", "Drivetrain", "Shimano", "105", "CN-HG601-11", "11-speed", 150, 3000),
    ("Chain", "Drivetrain", "SRAM", "Force", "D1 Flattop", "12-speed", 150, 3000),
    ("Cassette", "Drivetrain", "Shimano", "Ultegra", "CS-R8000", "11-30", 400, 10000),
    ("Cassette", "Drivetrain", "Shimano", "105", "CS-R7000", "11-32", 400, 10000),
    ("Cassette", "Drivetrain", "SRAM", "Force", "XG-1270", "10-33", 400, 10000),
    ("Chainring", "Drivetrain", "Shimano", "Ultegra", "FC-R8000", "52-36", 800, 20000),
    ("Rear Derailleur", "Drivetrain", "Shimano", "Ultegra", "RD-R8000", "", 1500, 40000),
    ("Brake Pads", "Brakes", "Shimano", "", "L05A-RF", "", 60, 1500),
    ("Brake Pads", "Brakes", "SRAM", "", "Organic", "", 50, 1200),
    ("Brake Caliper", "Brakes", "Shimano", "Ultegra", "BR-R8070", "", 3000, 60000),
    ("Rotor", "Disc Brakes", "Shimano", "Ultegra", "RT-CL800", "160mm", 800, 20000),
    ("Rotor", "Disc Brakes", "SRAM", "", "CenterLine", "140mm", 800, 20000),
    ("Tire", "Wheelset", "Continental", "Grand Prix", "5000", "700x28c", 200, 5000),
    ("Tire", "Wheelset", "Schwalbe", "Pro One", "TLE", "700x28c", 180, 4500),
    ("Handlebar Tape", "Cockpit", "Lizard Skins", "DSP", "V2", "", 300, 8000),
    ("Headset", "Frameset", "Cane Creek", "110", "IS42/28.6", "", 2000, 50000),
    ("Bottom Bracket", "Frameset", "Shimano", "Dura-Ace", "SM-BB9000", "BSA", 800, 20000),
    ("Bottle Cage", "Accessories", "Elite", "Custom Race", "Plus", "", None, None),
    ("Motor", "E-Bike", "Bosch", "Performance Line", "CX", "", 10000, 50000),
    ("Battery", "E-Bike", "Bosch", "PowerTube", "625", "625Wh", 3000, 30000),
]


class Command(BaseCommand):
    help = "Seed the shared master component catalog (idempotent)."

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding master component catalog..."))

        created_count = 0
        for name, system, brand, series, model, size, hours, distance in DEFAULT_CATALOG:
            _, created = MasterComponent.objects.get_or_create(
                name=name,
                system=system,
                brand=brand,
                series=series,
                model=model,
                size=size,
                defaults={
                    "lifespan_hours": hours,
                    "lifespan_distance": distance,
                },
            )
            if created:
                created_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog ready: {created_count} created, {len(DEFAULT_CATALOG) - created_count} already present."
            )
        )
