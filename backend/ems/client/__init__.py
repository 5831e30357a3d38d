"""Client Service Layer — HTTP access to the EMS API for frontends."""
