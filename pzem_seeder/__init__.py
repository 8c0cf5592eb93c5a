"""
PZEM Telemetry Seeder
Synthetic power-meter readings for MongoDB
"""
