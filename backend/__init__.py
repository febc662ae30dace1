"""Static delivery of the exported Bright Smile Dental site."""
