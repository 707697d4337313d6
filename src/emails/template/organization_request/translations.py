DEFAULT_TRANSLATIONS = {
    "en": {
        "subject": "New organization request: {organization_name}",
        "preheader": "An organization is waiting for approval.",
        "heading": "New organization request",
        "intro": "The following organization has asked to join Volunteer Hub.",
        "label_name": "Name",
        "label_email": "Email",
        "label_phone": "Phone",
        "label_url": "Website",
        "label_location": "Location",
        "label_coordinates": "Coordinates",
        "cta": "Review request",
        "footer": "You receive this email because you are a Volunteer Hub administrator.",
        "reply_to": "support@volunteerhub.org",
    },
    "es": {
        "subject": "Nueva solicitud de organización: {organization_name}",
        "preheader": "Una organización espera aprobación.",
        "heading": "Nueva solicitud de organización",
        "intro": "La siguiente organización ha solicitado unirse a Volunteer Hub.",
        "label_name": "Nombre",
        "label_email": "Correo",
        "label_phone": "Teléfono",
        "label_url": "Sitio web",
        "label_location": "Ubicación",
        "label_coordinates": "Coordenadas",
        "cta": "Revisar solicitud",
        "footer": "Recibe este correo porque es administrador de Volunteer Hub.",
        "reply_to": "support@volunteerhub.org",
    },
    "fr": {
        "subject": "Nouvelle demande d'organisation : {organization_name}",
        "preheader": "Une organisation attend une validation.",
        "heading": "Nouvelle demande d'organisation",
        "intro": "L'organisation suivante a demandé à rejoindre Volunteer Hub.",
        "label_name": "Nom",
        "label_email": "E-mail",
        "label_phone": "Téléphone",
        "label_url": "Site web",
        "label_location": "Lieu",
        "label_coordinates": "Coordonnées",
        "cta": "Examiner la demande",
        "footer": "Vous recevez cet e-mail car vous êtes administrateur de Volunteer Hub.",
        "reply_to": "support@volunteerhub.org",
    },
}
