"""Dev Event Hub: event listings and email-based seat bookings."""
